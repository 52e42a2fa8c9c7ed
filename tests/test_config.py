"""Tests for RenderSettings."""

import pytest

from pathtracer.config import RenderSettings
from pathtracer.core.vec3 import Vec3


class TestRenderSettings:
    """Tests for derived values and validation."""

    def test_image_height_truncates(self):
        assert RenderSettings(image_width=400, aspect_ratio=16.0 / 9.0).image_height == 225
        assert RenderSettings(image_width=100, aspect_ratio=3.0).image_height == 33

    def test_defaults(self):
        settings = RenderSettings()
        assert settings.samples_per_pixel == 100
        assert settings.max_depth == 50
        assert settings.background == Vec3(0.0, 0.0, 0.0)
        assert settings.workers >= 1
        assert settings.seed is None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"image_width": 0},
            {"aspect_ratio": 0.0},
            {"aspect_ratio": -1.0},
            {"image_width": 2, "aspect_ratio": 4.0},
            {"samples_per_pixel": 0},
            {"max_depth": -1},
            {"workers": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValueError):
            RenderSettings(**overrides)

    def test_zero_depth_allowed(self):
        assert RenderSettings(max_depth=0).max_depth == 0

    def test_frozen(self):
        settings = RenderSettings()
        with pytest.raises(AttributeError):
            settings.image_width = 10
