"""Isotropic phase function for participating media.

Scatters uniformly in every direction, drawing the new direction from the
unit ball. Used by ConstantMedium at each scattering point inside a volume.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, random_in_unit_sphere
from pathtracer.materials.base import Material, ScatterRecord
from pathtracer.textures.base import SolidColor, Texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Isotropic(Material):
    """Volume scattering with a textured albedo."""

    def __init__(self, albedo: Texture) -> None:
        self.albedo = albedo

    @classmethod
    def from_color(cls, color: Color) -> Isotropic:
        return cls(SolidColor(color))

    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        return ScatterRecord(
            attenuation=self.albedo.value(hit.u, hit.v, hit.point),
            scattered=Ray(hit.point, random_in_unit_sphere(rng), ray.time),
        )
