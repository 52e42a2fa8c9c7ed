"""Conversion of linear radiance buffers to displayable 8-bit color.

Each channel is gamma corrected with gamma 2 (square root), clamped to
``[0, 0.999]`` and scaled by 256, so that 1.0 maps to 255 and 0.0 to 0. The
per-channel work runs in a Taichi kernel over the whole image at once;
``ti.init`` must have been called before the first conversion.

Example:
    >>> import numpy as np
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from pathtracer.core.film import encode_rgb8
    >>> encode_rgb8(np.ones((1, 1, 3)))[0, 0].tolist()
    [255, 255, 255]
"""

import numpy as np
import numpy.typing as npt
import taichi as ti


# Upper clamp keeps 256 * value strictly below 256
MAX_INTENSITY = 0.999


@ti.func
def _encode_channel(value: ti.f64) -> ti.i32:
    """Gamma-correct, clamp and quantize one linear channel value."""
    corrected = ti.sqrt(ti.max(value, 0.0))
    clamped = ti.min(corrected, MAX_INTENSITY)
    return ti.cast(ti.floor(256.0 * clamped), ti.i32)


@ti.kernel
def _encode_kernel(
    linear: ti.types.ndarray(dtype=ti.f64, ndim=3),
    out: ti.types.ndarray(dtype=ti.i32, ndim=3),
):
    for row, col, channel in ti.ndrange(linear.shape[0], linear.shape[1], linear.shape[2]):
        out[row, col, channel] = _encode_channel(linear[row, col, channel])


def encode_rgb8(linear: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Encode a linear radiance image as 8-bit gamma-corrected RGB.

    Args:
        linear: Array of shape (height, width, 3) of linear radiance.
            Negative values encode as 0, values of 1.0 and above as 255.

    Returns:
        Array of the same shape with dtype uint8.

    Raises:
        ValueError: If the input is not an (height, width, 3) array.
    """
    buffer = np.ascontiguousarray(linear, dtype=np.float64)
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"Expected an (height, width, 3) image, got shape {buffer.shape}")

    out = np.zeros(buffer.shape, dtype=np.int32)
    if buffer.size:
        _encode_kernel(buffer, out)
    return out.astype(np.uint8)

