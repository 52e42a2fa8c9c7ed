"""Three-dimensional checkerboard texture."""

from __future__ import annotations

import math

from pathtracer.core.vec3 import Color, Point3
from pathtracer.textures.base import SolidColor, Texture

# Spatial frequency of the checker cells
CHECKER_FREQUENCY = 10.0


class CheckerTexture(Texture):
    """Alternates between two textures in a solid 3D checker pattern.

    The sign of ``sin(10x) * sin(10y) * sin(10z)`` selects the cell, so the
    pattern depends only on the hit point and not on surface coordinates.
    Negative cells use ``odd``, the rest ``even``.
    """

    def __init__(self, odd: Texture, even: Texture) -> None:
        self.odd = odd
        self.even = even

    @classmethod
    def from_colors(cls, odd: Color, even: Color) -> CheckerTexture:
        return cls(SolidColor(odd), SolidColor(even))

    def value(self, u: float, v: float, point: Point3) -> Color:
        sines = (
            math.sin(CHECKER_FREQUENCY * point.x)
            * math.sin(CHECKER_FREQUENCY * point.y)
            * math.sin(CHECKER_FREQUENCY * point.z)
        )
        if sines < 0.0:
            return self.odd.value(u, v, point)
        return self.even.value(u, v, point)
