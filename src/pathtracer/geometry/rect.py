"""Axis-aligned rectangles in the XY, XZ and YZ planes.

Each rectangle lies in the plane ``axis == k`` and spans ``[a0, a1] x [b0, b1]``
on the two free axes. Intersection solves for ``t`` against the plane, then
rejects points outside the free-axis ranges. Texture coordinates are the
normalized position inside those ranges.

The bounding box is padded by RECT_THICKNESS along the constant axis so it
never has zero width.
"""

from __future__ import annotations

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.materials.base import Material

RECT_THICKNESS = 0.0001

_UNIT_AXES = (Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0))


class AxisAlignedRect(Hittable):
    """Rectangle perpendicular to one coordinate axis.

    Subclasses fix which axis is constant (``normal_axis``) and which two are
    free (``a_axis``, ``b_axis``).

    Attributes:
        a0, a1: Extent along the first free axis.
        b0, b1: Extent along the second free axis.
        k: Coordinate of the plane along the constant axis.
        material: Surface material.
    """

    a_axis = 0
    b_axis = 1
    normal_axis = 2

    def __init__(
        self,
        a0: float,
        a1: float,
        b0: float,
        b1: float,
        k: float,
        material: Material,
    ) -> None:
        if not a0 < a1 or not b0 < b1:
            raise ValueError(
                f"{type(self).__name__} needs increasing ranges, got "
                f"[{a0}, {a1}] x [{b0}, {b1}]"
            )
        self.a0 = float(a0)
        self.a1 = float(a1)
        self.b0 = float(b0)
        self.b1 = float(b1)
        self.k = float(k)
        self.material = material
        self._outward_normal = _UNIT_AXES[self.normal_axis]

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        direction = ray.direction[self.normal_axis]
        if direction == 0.0:
            return None
        t = (self.k - ray.origin[self.normal_axis]) / direction
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        u = (a - self.a0) / (self.a1 - self.a0)
        v = (b - self.b0) / (self.b1 - self.b0)
        return HitRecord.from_outward_normal(ray, t, self._outward_normal, self.material, u, v)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        lo[self.normal_axis] = self.k - RECT_THICKNESS
        hi[self.normal_axis] = self.k + RECT_THICKNESS
        return AABB(Vec3(*lo), Vec3(*hi))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, k={self.k})"
        )


class XYRect(AxisAlignedRect):
    """Rectangle ``[x0, x1] x [y0, y1]`` in the plane ``z = k``."""

    a_axis = 0
    b_axis = 1
    normal_axis = 2


class XZRect(AxisAlignedRect):
    """Rectangle ``[x0, x1] x [z0, z1]`` in the plane ``y = k``."""

    a_axis = 0
    b_axis = 2
    normal_axis = 1


class YZRect(AxisAlignedRect):
    """Rectangle ``[y0, y1] x [z0, z1]`` in the plane ``x = k``."""

    a_axis = 1
    b_axis = 2
    normal_axis = 0
