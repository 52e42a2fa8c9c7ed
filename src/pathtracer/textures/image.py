"""Texture backed by a decoded RGB image.

Images are decoded with Pillow once, at scene construction, into an
``(height, width, 3)`` uint8 array. Lookups use nearest-pixel sampling with
``v`` flipped so that ``v = 1`` is the top row of the image.

Example:
    >>> from pathtracer.textures.image import ImageTexture
    >>> earth = ImageTexture.from_file("earthmap.jpg")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from os import PathLike

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from pathtracer.core.vec3 import Color, Point3, Vec3
from pathtracer.textures.base import Texture

logger = logging.getLogger(__name__)

_COLOR_SCALE = 1.0 / 255.0


class TextureLoadError(OSError):
    """Raised when an image texture cannot be read or decoded."""


class ImageTexture(Texture):
    """Nearest-pixel lookup into an 8-bit RGB image.

    Attributes:
        pixels: Array of shape (height, width, 3), dtype uint8, row 0 at the
            top of the image.
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, pixels: npt.NDArray[np.uint8]) -> None:
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(
                f"Expected an (height, width, 3) RGB array, got shape {pixels.shape}"
            )
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("Image texture must contain at least one pixel")
        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> ImageTexture:
        """Decode an image file into a texture.

        Any format Pillow reads is accepted; the image is converted to RGB.

        Args:
            path: Path to the image file.

        Returns:
            The decoded texture.

        Raises:
            TextureLoadError: If the file is missing, unreadable or not an
                image.
        """
        try:
            with PILImage.open(path) as image:
                pixels = np.asarray(image.convert("RGB"), dtype=np.uint8)
        except (FileNotFoundError, UnidentifiedImageError) as exc:
            raise TextureLoadError(f"Could not load texture image {path!s}: {exc}") from exc
        except OSError as exc:
            raise TextureLoadError(f"Could not decode texture image {path!s}: {exc}") from exc

        logger.debug("Loaded %dx%d texture from %s", pixels.shape[1], pixels.shape[0], path)
        return cls(pixels)

    def value(self, u: float, v: float, point: Point3) -> Color:
        u = min(max(u, 0.0), 1.0)
        # Flip v so that v = 1 addresses the first (top) row
        v = 1.0 - min(max(v, 0.0), 1.0)

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)
        red, green, blue = self.pixels[j, i].tolist()
        return Vec3(red * _COLOR_SCALE, green * _COLOR_SCALE, blue * _COLOR_SCALE)
