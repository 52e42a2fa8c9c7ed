"""Unit tests for the thin-lens camera.

Tests cover:
- Orthonormal basis construction
- Ray directions through the image center and corners
- Lens sampling with a non-zero aperture
- Shutter time sampling
- Parameter validation
"""

import math

import numpy as np
import pytest

from pathtracer.camera.lens import Camera, CameraParams
from pathtracer.core.vec3 import Vec3


def _pinhole(**overrides):
    params = dict(
        look_from=Vec3(0.0, 0.0, 0.0),
        look_at=Vec3(0.0, 0.0, -1.0),
        vup=Vec3(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=2.0,
        aperture=0.0,
        focus_dist=1.0,
    )
    params.update(overrides)
    return Camera(CameraParams(**params))


class TestBasis:
    """Tests for the camera frame."""

    def test_basis_is_orthonormal(self):
        camera = _pinhole(look_from=Vec3(3.0, 2.0, 1.0), look_at=Vec3(-1.0, 0.5, 4.0))
        for axis in (camera.u, camera.v, camera.w):
            assert axis.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
        assert camera.v.dot(camera.w) == pytest.approx(0.0, abs=1e-12)

    def test_w_points_backward(self):
        camera = _pinhole()
        assert camera.w == Vec3(0.0, 0.0, 1.0)
        assert camera.u == Vec3(1.0, 0.0, 0.0)


class TestRayGeneration:
    """Tests for primary rays."""

    def test_center_ray_points_at_target(self, rng):
        camera = _pinhole()
        ray = camera.ray(0.5, 0.5, rng)
        assert ray.origin == Vec3(0.0, 0.0, 0.0)
        direction = ray.direction.unit()
        assert direction.z == pytest.approx(-1.0)

    def test_lower_left_corner(self, rng):
        """90 degree vfov at unit focus: the viewport is 2 high and 4 wide."""
        camera = _pinhole()
        ray = camera.ray(0.0, 0.0, rng)
        assert ray.direction.x == pytest.approx(-2.0)
        assert ray.direction.y == pytest.approx(-1.0)
        assert ray.direction.z == pytest.approx(-1.0)

    def test_upper_right_corner(self, rng):
        camera = _pinhole()
        ray = camera.ray(1.0, 1.0, rng)
        assert ray.direction.x == pytest.approx(2.0)
        assert ray.direction.y == pytest.approx(1.0)

    def test_field_of_view(self, rng):
        camera = _pinhole(vfov=60.0, aspect_ratio=1.0)
        top = camera.ray(0.5, 1.0, rng).direction.unit()
        assert math.degrees(math.atan2(top.y, -top.z)) == pytest.approx(30.0)

    def test_aperture_jitters_origin_within_lens(self, rng):
        camera = _pinhole(aperture=2.0, focus_dist=5.0)
        origins = [camera.ray(0.5, 0.5, rng).origin for _ in range(200)]
        assert all(o.z == pytest.approx(0.0) for o in origins)
        assert all(o.x * o.x + o.y * o.y < 1.0 for o in origins)
        assert len({o.to_tuple() for o in origins}) > 100

    def test_rays_converge_on_focus_plane(self, rng):
        camera = _pinhole(aperture=2.0, focus_dist=5.0)
        for _ in range(20):
            ray = camera.ray(0.5, 0.5, rng)
            t = -5.0 / ray.direction.z
            focus_point = ray.at(t)
            assert focus_point.x == pytest.approx(0.0, abs=1e-9)
            assert focus_point.y == pytest.approx(0.0, abs=1e-9)

    def test_shutter_times_within_window(self, rng):
        camera = _pinhole(time0=0.25, time1=0.75)
        times = [camera.ray(0.5, 0.5, rng).time for _ in range(200)]
        assert all(0.25 <= t <= 0.75 for t in times)
        assert max(times) - min(times) > 0.3

    def test_degenerate_shutter_fixes_time(self, rng):
        camera = _pinhole(time0=0.4, time1=0.4)
        assert camera.ray(0.1, 0.9, rng).time == 0.4

    def test_same_stream_same_rays(self):
        camera = _pinhole(aperture=0.5, time1=1.0)
        a = camera.ray(0.3, 0.6, np.random.default_rng(5))
        b = camera.ray(0.3, 0.6, np.random.default_rng(5))
        assert a == b


class TestValidation:
    """Tests for CameraParams checks."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"vfov": 0.0},
            {"vfov": 180.0},
            {"aspect_ratio": 0.0},
            {"aperture": -0.1},
            {"focus_dist": 0.0},
            {"time0": 1.0, "time1": 0.0},
            {"look_at": Vec3(0.0, 0.0, 0.0)},
            {"vup": Vec3(0.0, 0.0, 1.0)},
        ],
    )
    def test_invalid_params_rejected(self, overrides):
        with pytest.raises(ValueError):
            _pinhole(**overrides)
