"""Dielectric (glass-like) material with refraction.

Implements transparent materials that both reflect and refract light. At each
hit the ray either reflects or refracts:

- Total internal reflection is forced when ``eta_ratio * sin(theta) > 1``.
- Otherwise the choice is random, reflecting with the probability given by
  Schlick's approximation of the Fresnel reflectance.

The ratio of refractive indices is ``1 / ior`` when entering the material
(front face) and ``ior`` when leaving it. Glass does not absorb, so the
attenuation is always white.

Common indices of refraction:
    - Air: 1.0
    - Water: 1.33
    - Glass: 1.5
    - Diamond: 2.4

Example:
    >>> from pathtracer.materials.dielectric import Dielectric
    >>> glass = Dielectric(1.5)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray, reflect, refract, schlick_fresnel
from pathtracer.core.vec3 import WHITE
from pathtracer.materials.base import Material, ScatterRecord

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

IOR_AIR = 1.0
IOR_WATER = 1.33
IOR_GLASS = 1.5
IOR_DIAMOND = 2.4


class Dielectric(Material):
    """Clear refractive material.

    Attributes:
        ior: Index of refraction relative to the surrounding medium.
    """

    def __init__(self, ior: float) -> None:
        if ior <= 0.0:
            raise ValueError(f"Index of refraction must be positive, got {ior}")
        self.ior = float(ior)

    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        eta_ratio = 1.0 / self.ior if hit.front_face else self.ior

        unit_direction = ray.direction.unit()
        cos_theta = min(-unit_direction.dot(hit.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = eta_ratio * sin_theta > 1.0
        if cannot_refract or rng.random() < schlick_fresnel(cos_theta, eta_ratio):
            direction = reflect(unit_direction, hit.normal)
        else:
            direction = refract(unit_direction, hit.normal, eta_ratio)

        return ScatterRecord(WHITE, Ray(hit.point, direction, ray.time))
