"""Textures supplying surface color to materials."""

from pathtracer.textures.base import SolidColor, Texture
from pathtracer.textures.checker import CheckerTexture
from pathtracer.textures.image import ImageTexture, TextureLoadError
from pathtracer.textures.perlin import NoiseTexture, Perlin

__all__ = [
    "CheckerTexture",
    "ImageTexture",
    "NoiseTexture",
    "Perlin",
    "SolidColor",
    "Texture",
    "TextureLoadError",
]
