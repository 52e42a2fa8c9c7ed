"""Emissive material for area lights."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, Point3
from pathtracer.materials.base import Material, ScatterRecord
from pathtracer.textures.base import SolidColor, Texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class DiffuseLight(Material):
    """Emits its texture's color and never scatters.

    Emission is not limited to [0, 1]; values above one make brighter lights.
    """

    def __init__(self, emit: Texture) -> None:
        self.emit = emit

    @classmethod
    def from_color(cls, color: Color) -> DiffuseLight:
        return cls(SolidColor(color))

    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        return None

    def emitted(self, u: float, v: float, point: Point3) -> Color:
        return self.emit.value(u, v, point)
