"""Material interface shared by every surface and volume scattering model.

A material answers two questions at a hit point:

    scatter(ray, hit, rng) -> ScatterRecord | None
        Sample an outgoing ray and the color it is attenuated by, or None if
        the path is absorbed.
    emitted(u, v, point) -> Color
        Radiance emitted at the point. Black for everything except lights.

Materials hold no mutable state and are shared freely between primitives and
render threads. All randomness comes from the ``rng`` the caller passes in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import BLACK, Color, Point3

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord


@dataclass(frozen=True, slots=True)
class ScatterRecord:
    """Outcome of a successful scatter event.

    Attributes:
        attenuation: Color multiplied into the path throughput.
        scattered: The outgoing ray, starting at the hit point.
    """

    attenuation: Color
    scattered: Ray


class Material(ABC):
    """Base class for scattering models."""

    @abstractmethod
    def scatter(
        self,
        ray: Ray,
        hit: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterRecord | None:
        """Sample the continuation of a path arriving along ``ray``.

        Args:
            ray: The incoming ray.
            hit: The intersection being shaded.
            rng: Random stream owned by the calling worker.

        Returns:
            The attenuation and outgoing ray, or None if the light is absorbed.
        """

    def emitted(self, u: float, v: float, point: Point3) -> Color:
        """Return emitted radiance; non-emissive materials return black."""
        return BLACK
