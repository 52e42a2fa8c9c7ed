"""Unit tests for axis-aligned rectangles.

Tests cover:
- Hits inside and outside the rectangle bounds
- Parallel rays and the t window
- Normal orientation from either side
- Texture coordinates
- Padded bounding boxes
- Rejection of degenerate extents
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.rect import RECT_THICKNESS, XYRect, XZRect, YZRect


class TestXYRect:
    """Tests for rectangles in the plane z = k."""

    def test_hit_inside(self, grey):
        rect = XYRect(0.0, 2.0, 0.0, 4.0, -1.0, grey)
        record = rect.hit(Ray(Vec3(1.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert record is not None
        assert record.t == pytest.approx(6.0)
        assert record.point == Vec3(1.0, 1.0, -1.0)
        assert (record.u, record.v) == pytest.approx((0.5, 0.25))

    def test_miss_outside_extent(self, grey):
        rect = XYRect(0.0, 2.0, 0.0, 4.0, -1.0, grey)
        assert rect.hit(Ray(Vec3(3.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf) is None
        assert rect.hit(Ray(Vec3(1.0, -0.5, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self, grey):
        rect = XYRect(0.0, 2.0, 0.0, 4.0, 0.0, grey)
        assert rect.hit(Ray(Vec3(-1.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0)), 0.001, math.inf) is None

    def test_outside_t_window(self, grey):
        rect = XYRect(0.0, 2.0, 0.0, 4.0, -1.0, grey)
        ray = Ray(Vec3(1.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0))
        assert rect.hit(ray, 0.001, 5.0) is None

    def test_normal_faces_ray_from_either_side(self, grey):
        rect = XYRect(0.0, 2.0, 0.0, 4.0, 0.0, grey)
        front = rect.hit(Ray(Vec3(1.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        back = rect.hit(Ray(Vec3(1.0, 1.0, -5.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf)
        assert front.front_face and front.normal == Vec3(0.0, 0.0, 1.0)
        assert not back.front_face and back.normal == Vec3(-0.0, -0.0, -1.0)

    def test_bounding_box_is_padded(self, grey):
        box = XYRect(0.0, 2.0, 0.0, 4.0, 3.0, grey).bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(0.0, 0.0, 3.0 - RECT_THICKNESS)
        assert box.maximum == Vec3(2.0, 4.0, 3.0 + RECT_THICKNESS)


class TestOtherPlanes:
    """Tests for XZ and YZ rectangles."""

    def test_xz_rect_hit_from_above(self, grey):
        rect = XZRect(-1.0, 1.0, -1.0, 1.0, 2.0, grey)
        record = rect.hit(Ray(Vec3(0.5, 10.0, -0.5), Vec3(0.0, -1.0, 0.0)), 0.001, math.inf)
        assert record.t == pytest.approx(8.0)
        assert record.normal == Vec3(0.0, 1.0, 0.0)
        assert (record.u, record.v) == pytest.approx((0.75, 0.25))

    def test_yz_rect_hit(self, grey):
        rect = YZRect(0.0, 1.0, 0.0, 1.0, 4.0, grey)
        record = rect.hit(Ray(Vec3(0.0, 0.5, 0.5), Vec3(2.0, 0.0, 0.0)), 0.001, math.inf)
        assert record.t == pytest.approx(2.0)
        assert record.point.x == pytest.approx(4.0)
        assert not record.front_face

    def test_yz_bounding_box(self, grey):
        box = YZRect(0.0, 1.0, 2.0, 3.0, 4.0, grey).bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(4.0 - RECT_THICKNESS, 0.0, 2.0)
        assert box.maximum == Vec3(4.0 + RECT_THICKNESS, 1.0, 3.0)


class TestValidation:
    """Tests for constructor argument checks."""

    @pytest.mark.parametrize("cls", [XYRect, XZRect, YZRect])
    def test_degenerate_extent_rejected(self, cls, grey):
        with pytest.raises(ValueError):
            cls(1.0, 1.0, 0.0, 1.0, 0.0, grey)
        with pytest.raises(ValueError):
            cls(0.0, 1.0, 2.0, 1.0, 0.0, grey)
