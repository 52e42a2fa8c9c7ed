"""Ray data structure and reflection/refraction utilities.

This module provides the Ray dataclass and the direction-transforming helpers
used by the scattering models. A ray carries the time at which it was cast so
that moving geometry and participating media can be sampled consistently.

Example:
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vec3 import Vec3
    >>> ray = Ray(origin=Vec3(0.0, 0.0, 0.0), direction=Vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)
    Vec3(0.0, 0.0, -5.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtracer.core.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point, a direction vector and a cast time.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be
            normalized; intersection routines work with any length.
        time: Shutter time at which the ray was cast (motion blur).
    """

    origin: Point3
    direction: Vec3
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """Return the point ``origin + t * direction``."""
        d = self.direction
        o = self.origin
        return Vec3(o.x + t * d.x, o.y + t * d.y, o.z + t * d.z)


# =============================================================================
# Direction Utilities
# =============================================================================


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal (unit length).

    Returns:
        The mirrored direction.
    """
    return incident - 2.0 * incident.dot(normal) * normal


def refract(incident: Vec3, normal: Vec3, eta_ratio: float) -> Vec3:
    """Refract a unit incident vector through a surface using Snell's law.

    The caller is responsible for checking total internal reflection first;
    this function always returns the transmitted direction.

    Args:
        incident: The incoming direction (unit length).
        normal: The surface normal, opposing the incident direction (unit length).
        eta_ratio: Ratio of refractive indices (n_incident / n_transmitted).

    Returns:
        The refracted direction (unit length for unit inputs).
    """
    cos_theta = min(-incident.dot(normal), 1.0)
    perpendicular = eta_ratio * (incident + cos_theta * normal)
    parallel = -math.sqrt(abs(1.0 - perpendicular.length_squared())) * normal
    return perpendicular + parallel


def schlick_fresnel(cosine: float, eta_ratio: float) -> float:
    """Approximate Fresnel reflectance with Schlick's polynomial.

    Args:
        cosine: Cosine of the angle between incident direction and normal.
        eta_ratio: Ratio of refractive indices.

    Returns:
        The reflectance probability in [0, 1].
    """
    r0 = (1.0 - eta_ratio) / (1.0 + eta_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5
