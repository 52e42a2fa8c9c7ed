"""Image export utilities for encoded renders.

Both writers take the 8-bit grid produced by ``film.encode_rgb8`` (shape
``(height, width, 3)``, dtype uint8, row 0 at the top of the image).

Supported formats:
    - PPM (plain-text P3, one pixel per line)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from pathtracer.core.film import encode_rgb8
    >>> from pathtracer.preview.export import save_image
    >>> save_image(encode_rgb8(linear), "render.png")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


def _check_rgb8(image: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (height, width, 3) image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got dtype {image.dtype}")
    return image


def write_ppm(image: npt.NDArray[np.uint8], stream: TextIO) -> None:
    """Write an image as plain-text PPM (P3) to an open text stream.

    The header is ``P3``, ``<width> <height>`` and the maximum value 255,
    followed by one ``r g b`` line per pixel in row-major order.

    Args:
        image: Encoded image of shape (height, width, 3), dtype uint8.
        stream: Destination, e.g. an open file or ``sys.stdout``.

    Raises:
        ValueError: If the image has the wrong shape or dtype.
    """
    image = _check_rgb8(image)
    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
    for row in image.tolist():
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row))


def save_ppm(image: npt.NDArray[np.uint8], filepath: str | PathLike[str]) -> None:
    """Save an image as a plain-text PPM file."""
    with open(filepath, "w", encoding="ascii") as stream:
        write_ppm(image, stream)
    logger.info("Saved PPM image: %s", filepath)


def save_png(image: npt.NDArray[np.uint8], filepath: str | PathLike[str]) -> None:
    """Save an image as an 8-bit RGB PNG file.

    Raises:
        ValueError: If the image has the wrong shape or dtype.
    """
    image = _check_rgb8(image)
    PILImage.fromarray(image).save(filepath, format="PNG")
    logger.info("Saved PNG image: %s", filepath)


def save_image(image: npt.NDArray[np.uint8], filepath: str | PathLike[str]) -> None:
    """Save an image, choosing the format from the file extension.

    ``.ppm`` writes plain-text PPM; every other extension goes through PNG.
    """
    if Path(filepath).suffix.lower() == ".ppm":
        save_ppm(image, filepath)
    else:
        save_png(image, filepath)
