"""Axis-aligned box built from six rectangles."""

from __future__ import annotations

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable, HittableList
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.materials.base import Material


class Box(Hittable):
    """Closed box spanning ``box_min`` to ``box_max``, one rectangle per face.

    Intersection delegates to the face list, so the nearest face wins and the
    normal always faces the incoming ray.
    """

    def __init__(self, box_min: Point3, box_max: Point3, material: Material) -> None:
        self.box_min = box_min
        self.box_max = box_max
        self.material = material

        p0, p1 = box_min, box_max
        self.sides = HittableList(
            [
                XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
                XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material),
            ]
        )

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(self.box_min, self.box_max)

    def __repr__(self) -> str:
        return f"Box({self.box_min!r}, {self.box_max!r})"
