"""Instance transforms that wrap another hittable.

Rather than moving geometry, the wrappers move the ray into the child's
object space, intersect there, and map the hit back to world space.
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable


class Translate(Hittable):
    """Child hittable displaced by ``offset``."""

    def __init__(self, child: Hittable, offset: Vec3) -> None:
        self.child = child
        self.offset = offset

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        record = self.child.hit(moved, t_min, t_max, rng)
        if record is None:
            return None
        record.point = record.point + self.offset
        return record

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return box.translated(self.offset)


class RotateY(Hittable):
    """Child hittable rotated about the Y axis by ``angle`` degrees.

    The world-space bounding box is computed once at construction from the
    child's box over the time window ``[0, 1]``, by rotating its 8 corners.
    Motion of the child outside that window is not reflected in the box.
    """

    def __init__(self, child: Hittable, angle: float) -> None:
        self.child = child
        self.angle = float(angle)
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self._bbox = self._rotated_box(child.bounding_box(0.0, 1.0))

    def _rotated_box(self, box: AABB | None) -> AABB | None:
        if box is None:
            return None

        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for x in (box.minimum.x, box.maximum.x):
            for y in (box.minimum.y, box.maximum.y):
                for z in (box.minimum.z, box.maximum.z):
                    new_x = self.cos_theta * x + self.sin_theta * z
                    new_z = -self.sin_theta * x + self.cos_theta * z
                    for axis, value in enumerate((new_x, y, new_z)):
                        lo[axis] = min(lo[axis], value)
                        hi[axis] = max(hi[axis], value)
        return AABB(Vec3(*lo), Vec3(*hi))

    def _to_object(self, p: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * p.x - self.sin_theta * p.z,
            p.y,
            self.sin_theta * p.x + self.cos_theta * p.z,
        )

    def _to_world(self, p: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * p.x + self.sin_theta * p.z,
            p.y,
            -self.sin_theta * p.x + self.cos_theta * p.z,
        )

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        record = self.child.hit(rotated, t_min, t_max, rng)
        if record is None:
            return None

        # Recover the outward normal, then orient it against the world-space ray
        outward = record.normal if record.front_face else -record.normal
        record.point = self._to_world(record.point)
        record.set_face_normal(ray, self._to_world(outward))
        return record

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self._bbox
