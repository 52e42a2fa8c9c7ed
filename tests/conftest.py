"""Pytest configuration for path tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import numpy as np
import pytest
import taichi as ti

from pathtracer.core.vec3 import Vec3
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def rng():
    """Seeded random stream so stochastic tests are repeatable."""
    return np.random.default_rng(12345)


@pytest.fixture
def grey():
    """Plain mid-grey diffuse material."""
    return Lambertian.from_color(Vec3(0.5, 0.5, 0.5))
