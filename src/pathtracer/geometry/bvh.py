"""Bounding Volume Hierarchy for accelerating nearest-hit queries.

The hierarchy is a binary tree built once per frame over the scene's
primitives. At each level a random axis is chosen, the primitives are
ordered by the minimum coordinate of their bounding boxes along that axis,
and the list is split at its midpoint. Leaves hold exactly one primitive.

Traversal prunes any subtree whose box the ray misses. At an internal node
the left child is probed first; if it hits at ``t_left`` the right child is
probed only over ``[t_min, t_left]``, so it can override the left hit only
with a strictly closer one.

Every primitive placed in the tree must report a bounding box. Unbounded
primitives are rejected with SceneConstructionError before any rendering
work starts.

Example:
    >>> import numpy as np
    >>> from pathtracer.geometry.bvh import build_bvh
    >>> world = build_bvh(scene_objects, 0.0, 1.0, np.random.default_rng(1))  # doctest: +SKIP
    >>> record = world.hit(ray, 0.001, float("inf"))  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.geometry.aabb import AABB
from pathtracer.geometry.hittable import HitRecord, Hittable

logger = logging.getLogger(__name__)


class SceneConstructionError(ValueError):
    """Raised when a scene cannot be turned into an acceleration structure."""


def _require_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise SceneConstructionError(
            f"{obj!r} has no bounding box and cannot be placed in a BVH"
        )
    return box


class BVHLeaf(Hittable):
    """Leaf holding one primitive and its precomputed bounding box."""

    __slots__ = ("primitive", "box")

    def __init__(self, primitive: Hittable, box: AABB) -> None:
        self.primitive = primitive
        self.box = box

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        if not self.box.hit(ray, t_min, t_max):
            return None
        return self.primitive.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.box


class BVHNode(Hittable):
    """Internal node owning two subtrees and the union of their boxes."""

    __slots__ = ("left", "right", "box")

    def __init__(self, left: Hittable, right: Hittable, box: AABB) -> None:
        self.left = left
        self.right = right
        self.box = box

    def hit(
        self,
        ray: Ray,
        t_min: float,
        t_max: float,
        rng: np.random.Generator | None = None,
    ) -> HitRecord | None:
        if not self.box.hit(ray, t_min, t_max):
            return None

        left_hit = self.left.hit(ray, t_min, t_max, rng)
        if left_hit is None:
            return self.right.hit(ray, t_min, t_max, rng)

        right_hit = self.right.hit(ray, t_min, left_hit.t, rng)
        return right_hit if right_hit is not None else left_hit

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.box


def _build(
    items: list[tuple[Hittable, AABB]],
    rng: np.random.Generator,
) -> Hittable:
    axis = int(rng.integers(0, 3))

    if len(items) == 1:
        primitive, box = items[0]
        return BVHLeaf(primitive, box)

    if len(items) == 2:
        ordered = sorted(items, key=lambda item: item[1].minimum[axis])
        left: Hittable = BVHLeaf(*ordered[0])
        right: Hittable = BVHLeaf(*ordered[1])
    else:
        ordered = sorted(items, key=lambda item: item[1].minimum[axis])
        mid = len(ordered) // 2
        left = _build(ordered[:mid], rng)
        right = _build(ordered[mid:], rng)

    box = left.bounding_box(0.0, 0.0).union(right.bounding_box(0.0, 0.0))
    return BVHNode(left, right, box)


def build_bvh(
    objects: Sequence[Hittable],
    time0: float = 0.0,
    time1: float = 1.0,
    rng: np.random.Generator | None = None,
) -> Hittable:
    """Build a BVH over ``objects`` for rays cast in ``[time0, time1]``.

    The input sequence is not modified.

    Args:
        objects: Primitives to organize; each must report a bounding box.
        time0: Shutter open time used for bounding moving primitives.
        time1: Shutter close time used for bounding moving primitives.
        rng: Random stream for split-axis selection. A fresh generator is
            used when omitted.

    Returns:
        The root of the tree (a BVHLeaf for a single primitive).

    Raises:
        SceneConstructionError: If ``objects`` is empty or any primitive
            lacks a bounding box.
    """
    if len(objects) == 0:
        raise SceneConstructionError("Cannot build a BVH over an empty scene")
    if rng is None:
        rng = np.random.default_rng()

    items = [(obj, _require_box(obj, time0, time1)) for obj in objects]
    root = _build(items, rng)
    logger.debug("Built BVH over %d primitives", len(items))
    return root
