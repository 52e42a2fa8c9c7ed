"""Perlin gradient noise and the marble-like noise texture built on it.

The generator holds 256 random unit gradient vectors and three independent
permutations of 0..255, one per axis. Noise at a point is the trilinear
interpolation of the dot products between the eight surrounding lattice
gradients and the offsets to the point, with Hermite smoothing applied to
the fractional coordinates.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.vec3 import Vec3
    >>> from pathtracer.textures.perlin import Perlin
    >>> perlin = Perlin(np.random.default_rng(3))
    >>> -1.0 <= perlin.noise(Vec3(0.3, 1.7, -2.2)) <= 1.0
    True
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.vec3 import Color, Point3, Vec3
from pathtracer.textures.base import Texture

POINT_COUNT = 256
TURBULENCE_DEPTH = 7


class Perlin:
    """Lattice gradient noise generator.

    Attributes:
        gradients: Array of shape (POINT_COUNT, 3) of unit vectors.
        perm_x: Permutation of ``range(POINT_COUNT)`` hashing x lattice indices.
        perm_y: Permutation hashing y lattice indices.
        perm_z: Permutation hashing z lattice indices.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        if rng is None:
            rng = np.random.default_rng()

        gradients = rng.uniform(-1.0, 1.0, (POINT_COUNT, 3))
        lengths = np.linalg.norm(gradients, axis=1, keepdims=True)
        # A zero-length draw is practically impossible; guard the division anyway
        lengths[lengths == 0.0] = 1.0
        self.gradients = gradients / lengths

        self.perm_x = rng.permutation(POINT_COUNT)
        self.perm_y = rng.permutation(POINT_COUNT)
        self.perm_z = rng.permutation(POINT_COUNT)

        # Plain lists keep per-sample lookups off the numpy scalar path
        self._gradients = [tuple(g) for g in self.gradients.tolist()]
        self._px = self.perm_x.tolist()
        self._py = self.perm_y.tolist()
        self._pz = self.perm_z.tolist()

    def noise(self, point: Point3) -> float:
        """Return the gradient noise value at ``point``, in roughly [-1, 1]."""
        fx = math.floor(point.x)
        fy = math.floor(point.y)
        fz = math.floor(point.z)
        u = point.x - fx
        v = point.y - fy
        w = point.z - fz
        i = int(fx)
        j = int(fy)
        k = int(fz)

        # Hermite smoothing of the interpolation weights
        uu = u * u * (3.0 - 2.0 * u)
        vv = v * v * (3.0 - 2.0 * v)
        ww = w * w * (3.0 - 2.0 * w)

        total = 0.0
        for di in (0, 1):
            px = self._px[(i + di) & 255]
            wx = uu if di else 1.0 - uu
            for dj in (0, 1):
                py = self._py[(j + dj) & 255]
                wy = vv if dj else 1.0 - vv
                for dk in (0, 1):
                    gx, gy, gz = self._gradients[px ^ py ^ self._pz[(k + dk) & 255]]
                    wz = ww if dk else 1.0 - ww
                    dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    total += wx * wy * wz * dot
        return total

    def turbulence(self, point: Point3, depth: int = TURBULENCE_DEPTH) -> float:
        """Return the absolute sum of ``depth`` noise octaves.

        Each octave doubles the frequency and halves the weight.
        """
        accum = 0.0
        temp = point
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp)
            weight *= 0.5
            temp = temp * 2.0
        return abs(accum)


class NoiseTexture(Texture):
    """Grey marble pattern: a sine along z phase-shifted by turbulence.

    Attributes:
        scale: Spatial frequency of the stripes.
        perlin: The noise generator.
    """

    def __init__(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> None:
        self.scale = float(scale)
        self.perlin = Perlin(rng)

    def value(self, u: float, v: float, point: Point3) -> Color:
        grey = 0.5 * (1.0 + math.sin(self.scale * point.z + 10.0 * self.perlin.turbulence(point)))
        return Vec3(grey, grey, grey)
