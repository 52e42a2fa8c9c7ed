"""Constant-density participating medium (smoke, fog, subsurface haze).

A ConstantMedium turns a closed boundary shape into a volume. A ray entering
the volume travels a random free-path distance drawn from the exponential
distribution with rate ``density``; if that distance is shorter than the
chord through the boundary, the ray scatters at that point using an
isotropic phase function.

The boundary must be convex (or at least hit at most twice along any ray).
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, Vec3
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.materials.isotropic import Isotropic
from pathtracer.textures.base import SolidColor, Texture

# Gap between entry and exit probes so the exit search skips the entry point
BOUNDARY_EPSILON = 0.0001

# Media have no surface, so hit records carry an arbitrary fixed normal
_ARBITRARY_NORMAL = Vec3(1.0, 0.0, 0.0)


class ConstantMedium(Hittable):
    """Volume of uniform density bounded by another hittable.

    Attributes:
        boundary: Closed shape enclosing the medium.
        density: Scattering events per unit length (must be positive).
        phase_function: Isotropic material applied at scatter points.
    """

    def __init__(self, boundary: Hittable, density: float, albedo: Texture | Color) -> None:
        if density <= 0.0:
            raise ValueError(f"Medium density must be positive, got {density}")
        if isinstance(albedo, Vec3):
            albedo = SolidColor(albedo)
        self.boundary = boundary
        self.density = float(density)
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        # Used only by callers that query without their own random stream
        self._default_rng = np.random.default_rng()

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        if rng is None:
            rng = self._default_rng

        entry = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if entry is None:
            return None
        exit_ = self.boundary.hit(ray, entry.t + BOUNDARY_EPSILON, math.inf, rng)
        if exit_ is None:
            return None

        t_enter = max(entry.t, t_min)
        t_exit = min(exit_.t, t_max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0.0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], keeping the logarithm finite
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            point=ray.at(t),
            normal=_ARBITRARY_NORMAL,
            t=t,
            u=0.0,
            v=0.0,
            front_face=True,
            material=self.phase_function,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.boundary.bounding_box(time0, time1)
