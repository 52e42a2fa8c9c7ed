"""Axis-aligned bounding boxes for the bounding volume hierarchy.

The slab test clips the ray's parametric interval against the three pairs of
axis-aligned planes; the ray hits the box iff the clipped interval is not
empty.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class AABB:
    """Axis-aligned box given by its minimum and maximum corners.

    Attributes:
        minimum: Corner with the smallest coordinate on every axis.
        maximum: Corner with the largest coordinate on every axis.
    """

    minimum: Point3
    maximum: Point3

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Return True if the ray segment ``[t_min, t_max]`` overlaps the box.

        A direction component of exactly zero means the ray is parallel to that
        slab; it overlaps only if the origin already lies between the planes.
        """
        for axis in range(3):
            origin = ray.origin[axis]
            direction = ray.direction[axis]
            lo = self.minimum[axis]
            hi = self.maximum[axis]
            if direction == 0.0:
                if origin < lo or origin > hi:
                    return False
                continue
            inv = 1.0 / direction
            t0 = (lo - origin) * inv
            t1 = (hi - origin) * inv
            if inv < 0.0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def union(self, other: AABB) -> AABB:
        """Return the smallest box enclosing both boxes."""
        return AABB(
            Vec3(
                min(self.minimum.x, other.minimum.x),
                min(self.minimum.y, other.minimum.y),
                min(self.minimum.z, other.minimum.z),
            ),
            Vec3(
                max(self.maximum.x, other.maximum.x),
                max(self.maximum.y, other.maximum.y),
                max(self.maximum.z, other.maximum.z),
            ),
        )

    def translated(self, offset: Vec3) -> AABB:
        """Return the box shifted by ``offset``."""
        return AABB(self.minimum + offset, self.maximum + offset)

    def contains(self, other: AABB) -> bool:
        """Return True if ``other`` lies entirely inside this box."""
        return all(
            self.minimum[axis] <= other.minimum[axis] and other.maximum[axis] <= self.maximum[axis]
            for axis in range(3)
        )
