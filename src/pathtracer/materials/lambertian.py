"""Lambertian (ideal diffuse) material.

Scattered directions are drawn as ``normal + random_unit_vector``, which is
distributed proportionally to the cosine of the angle from the normal. With
that distribution the BRDF and the sampling density cancel and the
attenuation is simply the surface albedo.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.vec3 import Vec3
    >>> from pathtracer.materials.lambertian import Lambertian
    >>> red = Lambertian.from_color(Vec3(0.65, 0.05, 0.05))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, random_unit_vector
from pathtracer.materials.base import Material, ScatterRecord
from pathtracer.textures.base import SolidColor, Texture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Lambertian(Material):
    """Diffuse material whose albedo comes from a texture.

    Attributes:
        albedo: Texture sampled at the hit's (u, v, point) for attenuation.
    """

    def __init__(self, albedo: Texture) -> None:
        self.albedo = albedo

    @classmethod
    def from_color(cls, color: Color) -> Lambertian:
        """Create a Lambertian with a constant albedo."""
        return cls(SolidColor(color))

    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        direction = hit.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction
        if direction.near_zero():
            direction = hit.normal

        return ScatterRecord(
            attenuation=self.albedo.value(hit.u, hit.v, hit.point),
            scattered=Ray(hit.point, direction, ray.time),
        )
