"""Matplotlib-based preview display for finished renders.

Example:
    >>> from pathtracer.preview.display import show_preview
    >>> show_preview(encode_rgb8(linear), title="cornell_box")  # doctest: +SKIP
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def show_preview(
    image: npt.NDArray[np.uint8],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display an encoded render in a Matplotlib figure.

    Args:
        image: Encoded image of shape (height, width, 3), dtype uint8.
        title: Figure title; defaults to the image dimensions.
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    height, width = image.shape[:2]

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {width}x{height}")

    plt.tight_layout()
    plt.show(block=block)
    plt.close(fig)
