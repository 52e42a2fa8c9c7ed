"""Unit tests for boxes and instance transforms.

Tests cover:
- Box intersection through its six faces
- Translation of hits and bounding boxes
- Y-axis rotation of hits, normals and bounding boxes
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.box import Box
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import RotateY, Translate


class TestBox:
    """Tests for the six-rectangle box."""

    def test_hits_nearest_face(self, grey):
        box = Box(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 2.0, 3.0), grey)
        record = box.hit(Ray(Vec3(0.5, 1.0, 10.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert record.t == pytest.approx(7.0)
        assert record.normal == Vec3(0.0, 0.0, 1.0)

    @pytest.mark.parametrize(
        "origin, direction, expected_t",
        [
            (Vec3(-5.0, 1.0, 1.0), Vec3(1.0, 0.0, 0.0), 5.0),
            (Vec3(5.0, 1.0, 1.0), Vec3(-1.0, 0.0, 0.0), 4.0),
            (Vec3(0.5, 10.0, 1.0), Vec3(0.0, -1.0, 0.0), 8.0),
            (Vec3(0.5, -10.0, 1.0), Vec3(0.0, 1.0, 0.0), 10.0),
        ],
    )
    def test_every_side_is_hit(self, grey, origin, direction, expected_t):
        box = Box(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 2.0, 3.0), grey)
        record = box.hit(Ray(origin, direction), 0.001, math.inf)
        assert record.t == pytest.approx(expected_t)
        assert record.normal.dot(direction) < 0.0

    def test_ray_from_inside_hits_far_face(self, grey):
        box = Box(Vec3(0.0, 0.0, 0.0), Vec3(2.0, 2.0, 2.0), grey)
        record = box.hit(Ray(Vec3(1.0, 1.0, 1.0), Vec3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert record.t == pytest.approx(1.0)
        assert not record.front_face

    def test_bounding_box_is_exact(self, grey):
        box = Box(Vec3(-1.0, 0.0, 2.0), Vec3(1.0, 5.0, 3.0), grey).bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(-1.0, 0.0, 2.0)
        assert box.maximum == Vec3(1.0, 5.0, 3.0)


class TestTranslate:
    """Tests for the translation wrapper."""

    def test_hit_point_is_shifted(self, grey):
        moved = Translate(Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey), Vec3(10.0, 0.0, 0.0))
        record = moved.hit(Ray(Vec3(10.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert record.t == pytest.approx(4.0)
        assert record.point.x == pytest.approx(10.0)
        assert record.point.z == pytest.approx(1.0)

    def test_original_position_is_empty(self, grey):
        moved = Translate(Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey), Vec3(10.0, 0.0, 0.0))
        assert moved.hit(Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_bounding_box_is_shifted(self, grey):
        moved = Translate(Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey), Vec3(1.0, 2.0, 3.0))
        box = moved.bounding_box(0.0, 1.0)
        assert box.minimum == Vec3(0.0, 1.0, 2.0)
        assert box.maximum == Vec3(2.0, 3.0, 4.0)


class TestRotateY:
    """Tests for the Y-axis rotation wrapper."""

    def test_rotated_box_bounding_box(self, grey):
        rotated = RotateY(Box(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), grey), 90.0)
        box = rotated.bounding_box(0.0, 1.0)
        assert box.minimum.x == pytest.approx(0.0, abs=1e-12)
        assert box.maximum.x == pytest.approx(1.0)
        assert box.minimum.z == pytest.approx(-1.0)
        assert box.maximum.z == pytest.approx(0.0, abs=1e-12)

    def test_45_degree_box_grows(self, grey):
        rotated = RotateY(Box(Vec3(-1.0, 0.0, -1.0), Vec3(1.0, 1.0, 1.0), grey), 45.0)
        box = rotated.bounding_box(0.0, 1.0)
        assert box.maximum.x == pytest.approx(math.sqrt(2.0))
        assert box.minimum.z == pytest.approx(-math.sqrt(2.0))
        assert box.maximum.y == pytest.approx(1.0)

    def test_hit_on_rotated_geometry(self, grey):
        """A box from x in [2, 3] rotated 90 degrees ends up at z in [-3, -2]."""
        rotated = RotateY(Box(Vec3(2.0, -1.0, -0.5), Vec3(3.0, 1.0, 0.5), grey), 90.0)
        record = rotated.hit(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert record is not None
        assert record.t == pytest.approx(2.0)
        assert record.point.z == pytest.approx(-2.0)
        assert record.normal.z == pytest.approx(1.0)

    def test_unrotated_position_is_missed(self, grey):
        rotated = RotateY(Box(Vec3(2.0, -1.0, -0.5), Vec3(3.0, 1.0, 0.5), grey), 90.0)
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
        assert rotated.hit(ray, 0.001, math.inf) is None

    def test_sphere_is_rotation_invariant(self, grey):
        sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, grey)
        rotated = RotateY(sphere, 33.0)
        ray = Ray(Vec3(0.3, 0.2, 5.0), Vec3(0.0, 0.0, -1.0))
        plain = sphere.hit(ray, 0.001, math.inf)
        turned = rotated.hit(ray, 0.001, math.inf)
        assert turned.t == pytest.approx(plain.t)
        for a, b in zip(turned.normal, plain.normal):
            assert a == pytest.approx(b)
        for a, b in zip(turned.point, plain.point):
            assert a == pytest.approx(b)
