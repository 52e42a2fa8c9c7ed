"""Thin-lens camera with defocus blur and a motion-blur shutter.

The camera builds an orthonormal basis (u, v, w) from the view parameters:
- w: points from look_at toward look_from (opposite view direction)
- u: points right in the image plane
- v: points up in the image plane

The focus plane sits ``focus_dist`` in front of the lens. Rays start at a
random point on a disk of radius ``aperture / 2`` spanned by (u, v) and pass
through the focus-plane point addressed by normalized image coordinates
``(s, t)``. Each ray also carries a random time inside the shutter interval.

Example:
    >>> import numpy as np
    >>> from pathtracer.camera.lens import Camera, CameraParams
    >>> from pathtracer.core.vec3 import Vec3
    >>> camera = Camera(CameraParams(
    ...     look_from=Vec3(13.0, 2.0, 3.0),
    ...     look_at=Vec3(0.0, 0.0, 0.0),
    ...     vfov=20.0,
    ...     aspect_ratio=16.0 / 9.0,
    ... ))
    >>> ray = camera.ray(0.5, 0.5, np.random.default_rng(0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3, random_in_unit_disk

# =============================================================================
# Camera Configuration
# =============================================================================


@dataclass(frozen=True)
class CameraParams:
    """View, lens and shutter configuration.

    Attributes:
        look_from: Camera position in world space.
        look_at: Point the camera is aimed at.
        vup: Up direction used to orient the camera (typically +Y).
        vfov: Vertical field of view in degrees, in (0, 180).
        aspect_ratio: Width divided by height of the output image.
        aperture: Lens diameter; 0 gives a pinhole with everything in focus.
        focus_dist: Distance from the lens to the plane of perfect focus.
        time0: Shutter open time.
        time1: Shutter close time.
    """

    look_from: Point3
    look_at: Point3
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    vfov: float = 40.0
    aspect_ratio: float = 1.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.aperture < 0.0:
            raise ValueError(f"aperture must be non-negative, got {self.aperture}")
        if self.focus_dist <= 0.0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.time1 < self.time0:
            raise ValueError(f"Shutter closes before it opens: [{self.time0}, {self.time1}]")
        if self.look_from == self.look_at:
            raise ValueError("look_from and look_at must differ")
        if (self.look_from - self.look_at).cross(self.vup).near_zero():
            raise ValueError("vup must not be parallel to the view direction")


# =============================================================================
# Ray Generation
# =============================================================================


class Camera:
    """Immutable ray generator derived from CameraParams.

    Attributes:
        origin: Lens center.
        u: Right basis vector.
        v: Up basis vector.
        w: Backward basis vector.
        lower_left_corner: Lower-left corner of the focus-plane viewport.
        horizontal: Full viewport width vector.
        vertical: Full viewport height vector.
        lens_radius: Half the aperture.
        time0: Shutter open time.
        time1: Shutter close time.
    """

    def __init__(self, params: CameraParams) -> None:
        self.params = params

        theta = math.radians(params.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h
        viewport_width = params.aspect_ratio * viewport_height

        self.w = (params.look_from - params.look_at).unit()
        self.u = params.vup.cross(self.w).unit()
        self.v = self.w.cross(self.u)

        self.origin = params.look_from
        self.horizontal = params.focus_dist * viewport_width * self.u
        self.vertical = params.focus_dist * viewport_height * self.v
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2.0
            - self.vertical / 2.0
            - params.focus_dist * self.w
        )

        self.lens_radius = params.aperture / 2.0
        self.time0 = params.time0
        self.time1 = params.time1

    def ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generate a ray through normalized image coordinates ``(s, t)``.

        ``s = 0`` is the left edge and ``t = 0`` the bottom edge.

        Args:
            s: Horizontal coordinate.
            t: Vertical coordinate.
            rng: Random stream for the lens and shutter samples.

        Returns:
            A ray leaving the lens at a random time within the shutter.
        """
        if self.lens_radius > 0.0:
            rd = self.lens_radius * random_in_unit_disk(rng)
            offset = self.u * rd.x + self.v * rd.y
            origin = self.origin + offset
        else:
            origin = self.origin

        if self.time1 > self.time0:
            time = float(rng.uniform(self.time0, self.time1))
        else:
            time = self.time0

        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(origin, target - origin, time)
