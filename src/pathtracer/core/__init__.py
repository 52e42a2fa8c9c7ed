"""Core math types, the radiance estimator and the parallel renderer.

``film`` is not imported here because it needs the Taichi runtime.
"""

from pathtracer.core.ray import Ray, reflect, refract, schlick_fresnel
from pathtracer.core.vec3 import (
    BLACK,
    WHITE,
    Color,
    Point3,
    Vec3,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
)

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Point3",
    "Ray",
    "Vec3",
    "random_in_unit_disk",
    "random_in_unit_sphere",
    "random_unit_vector",
    "reflect",
    "refract",
    "schlick_fresnel",
]
