"""Metal (specular) material with optional fuzzy reflection.

The incident direction is mirrored about the normal and then perturbed by a
random point in a ball of radius ``fuzz``. Perturbations that push the ray
below the surface absorb it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray, reflect
from pathtracer.core.vec3 import Color, random_in_unit_sphere
from pathtracer.materials.base import Material, ScatterRecord

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


class Metal(Material):
    """Reflective material.

    Attributes:
        albedo: Reflectance color applied on every bounce.
        fuzz: Roughness in [0, 1]; 0 is a perfect mirror. Inputs outside
            the range are clamped.
    """

    def __init__(self, albedo: Color, fuzz: float = 0.0) -> None:
        self.albedo = albedo
        self.fuzz = min(max(float(fuzz), 0.0), 1.0)

    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        reflected = reflect(ray.direction.unit(), hit.normal)
        if self.fuzz > 0.0:
            reflected = reflected + self.fuzz * random_in_unit_sphere(rng)

        if reflected.dot(hit.normal) <= 0.0:
            return None
        return ScatterRecord(self.albedo, Ray(hit.point, reflected, ray.time))
