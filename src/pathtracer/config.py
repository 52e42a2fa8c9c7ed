"""Render settings shared by the renderer and the example entry points.

Example:
    >>> from pathtracer.config import RenderSettings
    >>> settings = RenderSettings(image_width=400, aspect_ratio=16.0 / 9.0)
    >>> settings.image_height
    225
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pathtracer.core.vec3 import Color, Vec3

DEFAULT_SAMPLES_PER_PIXEL = 100
DEFAULT_MAX_DEPTH = 50


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RenderSettings:
    """Image size, sampling and threading parameters for one render.

    Attributes:
        image_width: Output width in pixels.
        aspect_ratio: Width divided by height; sets ``image_height``.
        samples_per_pixel: Camera rays averaged per pixel.
        max_depth: Maximum number of scattering events per path.
        background: Radiance returned by rays that escape the scene.
        workers: Number of render threads.
        seed: Root seed for every random stream of the render. None draws
            fresh entropy, so repeated renders differ.
    """

    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL
    max_depth: int = DEFAULT_MAX_DEPTH
    background: Color = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    workers: int = field(default_factory=_default_workers)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {self.image_width}")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_height < 1:
            raise ValueError(
                f"image_width {self.image_width} and aspect_ratio {self.aspect_ratio} "
                "give an image with no rows"
            )
        if self.samples_per_pixel < 1:
            raise ValueError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}"
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)
