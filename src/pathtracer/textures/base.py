"""Texture interface and the constant-color texture.

A texture maps surface coordinates ``(u, v)`` and the world-space hit point
to a color. Textures are immutable after construction and safe to share
between materials and render threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pathtracer.core.vec3 import Color, Point3, Vec3


class Texture(ABC):
    """Base class for color lookups."""

    @abstractmethod
    def value(self, u: float, v: float, point: Point3) -> Color:
        """Return the color at texture coordinates ``(u, v)`` and ``point``."""


class SolidColor(Texture):
    """Texture returning the same color everywhere."""

    def __init__(self, color: Color) -> None:
        self.color = color

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> SolidColor:
        return cls(Vec3(red, green, blue))

    def value(self, u: float, v: float, point: Point3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r})"
