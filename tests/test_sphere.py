"""Unit tests for static and moving spheres.

Tests cover:
- Nearest root selection and the far-root fallback
- Tangent and missing rays
- Normal orientation and front-face flag
- Texture coordinates
- Bounding boxes, including motion over a time window
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.sphere import MovingSphere, Sphere, sphere_uv


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside_returns_near_root(self, grey):
        """A ray from distance d toward the center hits at d - r."""
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        record = sphere.hit(Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert record is not None
        assert record.t == pytest.approx(4.0)
        assert record.point.z == pytest.approx(1.0)
        assert record.front_face
        assert record.normal.z == pytest.approx(1.0)
        assert record.material is grey

    def test_unnormalized_direction(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        record = sphere.hit(Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -2.0)), 0.001, math.inf)
        assert record.t == pytest.approx(2.0)

    def test_hit_from_inside_returns_far_root(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 2.0, grey)
        record = sphere.hit(Ray(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert record.t == pytest.approx(2.0)
        assert not record.front_face
        # Normal is flipped to face the ray
        assert record.normal.x == pytest.approx(-1.0)

    def test_miss(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        assert sphere.hit(Ray(Vec3(0.0, 2.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_tangent_ray_hits_once(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        record = sphere.hit(Ray(Vec3(-5.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert record is not None
        assert record.t == pytest.approx(5.0)
        assert record.point.y == pytest.approx(1.0)

    def test_both_roots_out_of_range(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, 0.001, 3.0) is None
        assert sphere.hit(ray, 7.0, math.inf) is None

    def test_sphere_behind_ray_is_missed(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        assert sphere.hit(Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf) is None


class TestSphereUV:
    """Tests for spherical texture coordinates."""

    @pytest.mark.parametrize(
        "normal, expected",
        [
            (Vec3(1.0, 0.0, 0.0), (0.5, 0.5)),
            (Vec3(0.0, 1.0, 0.0), (0.5, 1.0)),
            (Vec3(0.0, -1.0, 0.0), (0.5, 0.0)),
            (Vec3(-1.0, 0.0, 0.0), (0.0, 0.5)),
            (Vec3(0.0, 0.0, 1.0), (0.25, 0.5)),
            (Vec3(0.0, 0.0, -1.0), (0.75, 0.5)),
        ],
    )
    def test_known_points(self, normal, expected):
        u, v = sphere_uv(normal)
        assert u == pytest.approx(expected[0]) or (expected[0] == 0.0 and u == pytest.approx(1.0))
        assert v == pytest.approx(expected[1])

    def test_hit_record_carries_uv(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        record = sphere.hit(Ray(Vec3(5.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0)), 0.001, math.inf)
        assert (record.u, record.v) == pytest.approx((0.5, 0.5))


class TestSphereBoundingBox:
    """Tests for sphere bounding boxes."""

    def test_static_box(self, grey):
        box = Sphere(Vec3(1.0, 2.0, 3.0), 0.5, grey).bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(0.5, 1.5, 2.5)
        assert box.maximum == Vec3(1.5, 2.5, 3.5)

    def test_moving_box_covers_both_ends(self, grey):
        sphere = MovingSphere(Vec3(0.0, 0.0, 0.0), Vec3(4.0, 0.0, 0.0), 0.0, 1.0, 1.0, grey)
        box = sphere.bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(-1.0, -1.0, -1.0)
        assert box.maximum == Vec3(5.0, 1.0, 1.0)

    def test_moving_box_uses_queried_window(self, grey):
        sphere = MovingSphere(Vec3(0.0, 0.0, 0.0), Vec3(4.0, 0.0, 0.0), 0.0, 1.0, 1.0, grey)
        box = sphere.bounding_box(0.0, 0.5)
        assert box.maximum.x == pytest.approx(3.0)


class TestMovingSphere:
    """Tests for time-dependent intersection."""

    def test_center_interpolates(self, grey):
        sphere = MovingSphere(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0), 0.0, 1.0, 0.5, grey)
        assert sphere.center(0.0) == Vec3(0.0, 0.0, 0.0)
        assert sphere.center(0.5) == Vec3(0.0, 1.0, 0.0)
        assert sphere.center(1.0) == Vec3(0.0, 2.0, 0.0)

    def test_hit_depends_on_ray_time(self, grey):
        sphere = MovingSphere(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0), 0.0, 1.0, 0.5, grey)
        early = Ray(Vec3(0.0, 2.0, 5.0), Vec3(0.0, 0.0, -1.0), time=0.0)
        late = Ray(Vec3(0.0, 2.0, 5.0), Vec3(0.0, 0.0, -1.0), time=1.0)
        assert sphere.hit(early, 0.001, math.inf) is None
        record = sphere.hit(late, 0.001, math.inf)
        assert record is not None
        assert record.t == pytest.approx(4.5)
