"""Intersectable geometry and the BVH acceleration structure.

Components:
    aabb: Axis-aligned bounding boxes and the slab test
    hittable: Hit records, the Hittable interface and HittableList
    sphere: Static and moving spheres
    rect: Axis-aligned rectangles
    box: Six-sided boxes
    transform: Translation and Y-axis rotation wrappers
    medium: Constant-density participating media
    bvh: Bounding volume hierarchy
"""

from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHLeaf, BVHNode, SceneConstructionError, build_bvh
from pathtracer.geometry.hittable import HitRecord, Hittable, HittableList
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.rect import AxisAlignedRect, XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate

__all__ = [
    "AABB",
    "AxisAlignedRect",
    "BVHLeaf",
    "BVHNode",
    "Box",
    "ConstantMedium",
    "HitRecord",
    "Hittable",
    "HittableList",
    "MovingSphere",
    "RotateY",
    "SceneConstructionError",
    "Sphere",
    "Translate",
    "XYRect",
    "XZRect",
    "YZRect",
    "build_bvh",
]
