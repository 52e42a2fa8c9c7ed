"""Monte Carlo radiance estimator.

Follows a light path backward from the camera. At each surface the path
collects the surface's emission weighted by the current throughput, then
asks the material for a scattered ray and multiplies the throughput by the
scattering attenuation. A path ends when it escapes the scene (collecting
the background), when the material absorbs it, or when the depth budget runs
out (contributing nothing further).

The estimator is the iterative form of

    L(ray, d) = 0                                   if d <= 0
              = background                          if ray misses
              = Le + attenuation * L(scattered, d-1) otherwise

and produces the same value for the same random draws.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.integrator import radiance
    >>> color = radiance(ray, background, world, 50, np.random.default_rng(0))  # doctest: +SKIP
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import BLACK, Color, Vec3
from pathtracer.geometry.hittable import Hittable

# =============================================================================
# Rendering Constants
# =============================================================================

# Minimum hit distance; skips self-intersection at the scatter origin
T_MIN = 0.001

T_MAX = math.inf


def radiance(
    ray: Ray,
    background: Color,
    world: Hittable,
    depth: int,
    rng: np.random.Generator,
) -> Color:
    """Estimate the radiance arriving along ``ray``.

    Args:
        ray: Camera or scattered ray to trace.
        background: Radiance for rays that leave the scene.
        world: Scene root, usually a BVH.
        depth: Maximum number of surface interactions to follow.
        rng: Random stream owned by the calling worker.

    Returns:
        Linear RGB radiance, unbounded above.
    """
    if depth <= 0:
        return BLACK

    total_r = total_g = total_b = 0.0
    throughput = Vec3(1.0, 1.0, 1.0)

    for _ in range(depth):
        hit = world.hit(ray, T_MIN, T_MAX, rng)
        if hit is None:
            contribution = throughput * background
            return Vec3(
                total_r + contribution.x,
                total_g + contribution.y,
                total_b + contribution.z,
            )

        emitted = hit.material.emitted(hit.u, hit.v, hit.point)
        total_r += throughput.x * emitted.x
        total_g += throughput.y * emitted.y
        total_b += throughput.z * emitted.z

        scattered = hit.material.scatter(ray, hit, rng)
        if scattered is None:
            break

        throughput = throughput * scattered.attenuation
        ray = scattered.scattered

    return Vec3(total_r, total_g, total_b)
