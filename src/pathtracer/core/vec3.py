"""Three-component vector value type used for points, directions and colors.

This module provides the Vec3 class together with the random generators the
Monte Carlo sampling code draws from. All random generators take an explicit
``numpy.random.Generator`` so that each render worker owns its own stream.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.vec3 import Vec3, random_in_unit_sphere
    >>> a = Vec3(1.0, 2.0, 3.0)
    >>> b = Vec3(0.0, 1.0, 0.0)
    >>> a.dot(b)
    2.0
    >>> p = random_in_unit_sphere(np.random.default_rng(7))
    >>> p.length_squared() < 1.0
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

# Components below this magnitude count as zero for degenerate-direction checks
NEAR_ZERO_EPSILON = 1e-8


class Vec3:
    """3D vector of 64-bit floats with value semantics.

    Used interchangeably as a point, a direction or an RGB color. Arithmetic
    is componentwise; multiplying two vectors gives the Hadamard product,
    which is what color attenuation needs. Instances are never mutated after
    construction; every operation returns a new vector.

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    # Color aliases
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vec3 index out of range: {index}")

    def __len__(self) -> int:
        return 3

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other: float) -> Vec3:
        inv = 1.0 / other
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Return the squared Euclidean length (no square root)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec3:
        """Return the vector scaled to unit length.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        return self / self.length()

    def near_zero(self) -> bool:
        """Return True if every component is within NEAR_ZERO_EPSILON of zero."""
        s = NEAR_ZERO_EPSILON
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_iterable(cls, values) -> Vec3:
        """Build a vector from any 3-element iterable (tuple, list, ndarray)."""
        x, y, z = values
        return cls(x, y, z)

    @classmethod
    def random(cls, rng: np.random.Generator, low: float = 0.0, high: float = 1.0) -> Vec3:
        """Return a vector uniformly distributed in the cube ``[low, high)^3``."""
        x, y, z = rng.uniform(low, high, 3).tolist()
        return cls(x, y, z)


# Type aliases for readability at call sites
Point3 = Vec3
Color = Vec3

BLACK = Vec3(0.0, 0.0, 0.0)
WHITE = Vec3(1.0, 1.0, 1.0)


# =============================================================================
# Random Sampling Utilities for Monte Carlo
# =============================================================================


def random_in_unit_sphere(rng: np.random.Generator) -> Vec3:
    """Generate a random point strictly inside the unit ball.

    Uses rejection sampling from the enclosing cube.

    Args:
        rng: Random stream owned by the calling worker.

    Returns:
        A point with squared length < 1.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, 3).tolist()
        if x * x + y * y + z * z < 1.0:
            return Vec3(x, y, z)


def random_unit_vector(rng: np.random.Generator) -> Vec3:
    """Generate a unit vector uniformly distributed on the sphere."""
    while True:
        p = random_in_unit_sphere(rng)
        length_sq = p.length_squared()
        # Rejects the vanishingly rare draws too close to the origin to normalize
        if length_sq > 1e-160:
            return p / math.sqrt(length_sq)


def random_in_unit_disk(rng: np.random.Generator) -> Vec3:
    """Generate a random point (x, y, 0) inside the unit disk.

    Used for sampling the camera lens aperture.
    """
    while True:
        x, y = rng.uniform(-1.0, 1.0, 2).tolist()
        if x * x + y * y < 1.0:
            return Vec3(x, y, 0.0)
