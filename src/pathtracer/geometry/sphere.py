"""Sphere primitives: a static sphere and a sphere moving linearly in time.

The ray-sphere intersection is found by solving

    |origin + t * direction - center|^2 = radius^2

which expands to the quadratic ``a*t^2 + 2*h*t + c = 0`` with

    a = dot(direction, direction)
    h = dot(direction, oc)      (half of the traditional b)
    c = dot(oc, oc) - radius^2
    oc = origin - center

The nearer root is taken if it lies within ``[t_min, t_max]``, otherwise the
farther one. A negative discriminant means the ray misses.

Example:
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vec3 import Vec3
    >>> from pathtracer.geometry.sphere import Sphere
    >>> from pathtracer.materials.lambertian import Lambertian
    >>> sphere = Sphere(Vec3(0, 0, 0), 1.0, Lambertian.from_color(Vec3(0.5, 0.5, 0.5)))
    >>> sphere.hit(Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)), 0.001, 1000.0).t
    4.0
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.materials.base import Material


def sphere_uv(outward_normal: Vec3) -> tuple[float, float]:
    """Map a point on the unit sphere to texture coordinates.

    ``u`` is the longitude measured from -X around the Y axis, ``v`` the
    latitude from -Y (v = 0) to +Y (v = 1), both in [0, 1].

    Args:
        outward_normal: Unit outward normal at the surface point.

    Returns:
        Tuple of (u, v).
    """
    theta = math.acos(max(-1.0, min(1.0, -outward_normal.y)))
    phi = math.atan2(-outward_normal.z, outward_normal.x) + math.pi
    return phi / (2.0 * math.pi), theta / math.pi


def _solve(
    ray: Ray,
    center: Point3,
    radius: float,
    t_min: float,
    t_max: float,
) -> float | None:
    """Return the first root of the ray-sphere quadratic in range, or None."""
    oc = ray.origin - center
    direction = ray.direction
    a = direction.length_squared()
    h = oc.dot(direction)
    c = oc.length_squared() - radius * radius
    discriminant = h * h - a * c
    if discriminant < 0.0:
        return None

    sqrt_d = math.sqrt(discriminant)
    root = (-h - sqrt_d) / a
    if root < t_min or root > t_max:
        root = (-h + sqrt_d) / a
        if root < t_min or root > t_max:
            return None
    return root


def _hit_record(ray: Ray, t: float, center: Point3, radius: float, material: Material) -> HitRecord:
    point = ray.at(t)
    outward_normal = (point - center) / radius
    u, v = sphere_uv(outward_normal)
    front_face = ray.direction.dot(outward_normal) < 0.0
    normal = outward_normal if front_face else -outward_normal
    return HitRecord(point, normal, t, u, v, front_face, material)


class Sphere(Hittable):
    """A static sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere.
        material: Surface material.
    """

    def __init__(self, center: Point3, radius: float, material: Material) -> None:
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        t = _solve(ray, self.center, self.radius, t_min, t_max)
        if t is None:
            return None
        return _hit_record(ray, t, self.center, self.radius, self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        r = abs(self.radius)
        extent = Vec3(r, r, r)
        return AABB(self.center - extent, self.center + extent)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"


class MovingSphere(Hittable):
    """A sphere whose center moves linearly from ``center0`` to ``center1``.

    The center is at ``center0`` when the ray time equals ``time0`` and at
    ``center1`` when it equals ``time1``; times outside the window
    extrapolate. ``time0 != time1`` is the caller's responsibility.

    Attributes:
        center0: Center at ``time0``.
        center1: Center at ``time1``.
        time0: Start of the motion window.
        time1: End of the motion window.
        radius: The radius of the sphere.
        material: Surface material.
    """

    def __init__(
        self,
        center0: Point3,
        center1: Point3,
        time0: float,
        time1: float,
        radius: float,
        material: Material,
    ) -> None:
        self.center0 = center0
        self.center1 = center1
        self.time0 = float(time0)
        self.time1 = float(time1)
        self.radius = float(radius)
        self.material = material

    def center(self, time: float) -> Point3:
        """Return the interpolated center at ``time``."""
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + fraction * (self.center1 - self.center0)

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        center = self.center(ray.time)
        t = _solve(ray, center, self.radius, t_min, t_max)
        if t is None:
            return None
        return _hit_record(ray, t, center, self.radius, self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        r = abs(self.radius)
        extent = Vec3(r, r, r)
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - extent, c0 + extent)
        box1 = AABB(c1 - extent, c1 + extent)
        return box0.union(box1)
