"""Hit records and the Hittable interface shared by all primitives.

Every intersectable object (shapes, transforms, media and BVH nodes)
implements two queries:

    hit(ray, t_min, t_max, rng) -> HitRecord | None
    bounding_box(time0, time1) -> AABB | None

``rng`` is the caller's random stream. Only stochastic primitives such as
participating media draw from it; deterministic shapes ignore it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3
from pathtracer.geometry.aabb import AABB

if TYPE_CHECKING:
    from pathtracer.materials.base import Material


@dataclass(slots=True)
class HitRecord:
    """Record of a ray-primitive intersection.

    Attributes:
        point: World-space intersection point.
        normal: Unit surface normal, always facing against the incoming ray.
        t: Ray parameter of the intersection, within the queried window.
        u: First surface texture coordinate.
        v: Second surface texture coordinate.
        front_face: True if the ray struck the outside of the surface, i.e.
            the geometric outward normal opposed the ray direction.
        material: Material of the surface that was hit.
    """

    point: Point3
    normal: Vec3
    t: float
    u: float
    v: float
    front_face: bool
    material: Material

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        t: float,
        outward_normal: Vec3,
        material: Material,
        u: float = 0.0,
        v: float = 0.0,
    ) -> HitRecord:
        """Build a record, orienting the normal against the ray.

        Args:
            ray: The incoming ray.
            t: The intersection parameter.
            outward_normal: Unit normal pointing out of the surface.
            material: The surface material.
            u: Texture coordinate.
            v: Texture coordinate.
        """
        front_face = ray.direction.dot(outward_normal) < 0.0
        normal = outward_normal if front_face else -outward_normal
        return cls(ray.at(t), normal, t, u, v, front_face, material)

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Re-orient the stored normal against ``ray`` given an outward normal."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Base class for anything a ray can intersect."""

    @abstractmethod
    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        """Return the nearest intersection with ``t`` in ``[t_min, t_max]``, or None."""

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Return a box enclosing the object over ``[time0, time1]``, or None if unbounded."""


class HittableList(Hittable):
    """Ordered collection of hittables searched by linear scan.

    Used for the faces of a box and as the unaccelerated scene container.
    """

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        closest = None
        closest_t = t_max
        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_t, rng)
            if record is not None:
                closest_t = record.t
                closest = record
        return closest

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        # Unbounded members are skipped; None only when nothing is bounded
        result = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                continue
            result = box if result is None else result.union(box)
        return result
