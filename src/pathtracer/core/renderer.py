"""Parallel pixel sampling.

Rows are rendered one after another from the top of the image to the
bottom. Within a row every pixel is an independent task submitted to a
thread pool; ``Executor.map`` returns the results in column order, so the
output grid needs no reordering or locking. The scene, camera, materials
and textures are only ever read during a render.

Each pixel owns a ``numpy.random.Generator`` spawned from one root
``SeedSequence`` in the submitting thread. Streams are independent, and a
fixed seed reproduces the same image regardless of the worker count.

Pixel sampling is pure Python and holds the GIL, so extra workers buy
little throughput. What the pool guarantees is the task structure: every
pixel is sampled in isolation with its own stream.

Example:
    >>> from pathtracer.config import RenderSettings
    >>> from pathtracer.core.renderer import render
    >>> from pathtracer.scene.demo import two_spheres
    >>> scene = two_spheres(aspect_ratio=1.0)
    >>> settings = RenderSettings(image_width=32, aspect_ratio=1.0, samples_per_pixel=4)
    >>> image = render(scene.world(), scene.camera, settings)  # doctest: +SKIP
    >>> image.shape  # doctest: +SKIP
    (32, 32, 3)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import numpy.typing as npt

from pathtracer.camera.lens import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.integrator import radiance
from pathtracer.core.vec3 import Color, Vec3
from pathtracer.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


def render_pixel(
    world: Hittable,
    camera: Camera,
    i: int,
    j: int,
    width: int,
    height: int,
    samples_per_pixel: int,
    max_depth: int,
    background: Color,
    rng: np.random.Generator,
) -> Color:
    """Average ``samples_per_pixel`` jittered radiance samples for one pixel.

    Args:
        world: Scene root.
        camera: Primary ray generator.
        i: Column index, 0 at the left edge.
        j: Row index, 0 at the bottom edge.
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_pixel: Number of samples to average.
        max_depth: Path depth budget.
        background: Radiance for escaping rays.
        rng: Random stream owned by this pixel.

    Returns:
        The mean linear radiance.
    """
    # Single-pixel extents have no span to normalize against
    s_scale = 1.0 / max(width - 1, 1)
    t_scale = 1.0 / max(height - 1, 1)

    sum_r = sum_g = sum_b = 0.0
    for _ in range(samples_per_pixel):
        du, dv = rng.random(2).tolist()
        ray = camera.ray((i + du) * s_scale, (j + dv) * t_scale, rng)
        color = radiance(ray, background, world, max_depth, rng)
        sum_r += color.x
        sum_g += color.y
        sum_b += color.z

    scale = 1.0 / samples_per_pixel
    return Vec3(sum_r * scale, sum_g * scale, sum_b * scale)


def render(
    world: Hittable,
    camera: Camera,
    settings: RenderSettings,
    progress: ProgressCallback | None = None,
) -> npt.NDArray[np.float64]:
    """Render a full image.

    Args:
        world: Scene root, usually built with ``build_bvh``.
        camera: Primary ray generator.
        settings: Image size, sampling, threading and seed.
        progress: Optional callback invoked after each completed row.

    Returns:
        Array of shape (image_height, image_width, 3), dtype float64, of
        averaged linear radiance. Row 0 is the top of the image.
    """
    width = settings.image_width
    height = settings.image_height
    root_seed = np.random.SeedSequence(settings.seed)
    image = np.zeros((height, width, 3), dtype=np.float64)

    logger.info(
        "Rendering %dx%d at %d spp, depth %d, %d workers",
        width,
        height,
        settings.samples_per_pixel,
        settings.max_depth,
        settings.workers,
    )
    start = time.perf_counter()

    def pixel_task(i: int, j: int, seed: np.random.SeedSequence) -> Color:
        return render_pixel(
            world,
            camera,
            i,
            j,
            width,
            height,
            settings.samples_per_pixel,
            settings.max_depth,
            settings.background,
            np.random.default_rng(seed),
        )

    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        for row in range(height):
            j = height - 1 - row
            seeds = root_seed.spawn(width)
            colors = executor.map(pixel_task, range(width), [j] * width, seeds)
            for i, color in enumerate(colors):
                image[row, i] = (color.x, color.y, color.z)

            logger.debug("Finished row %d/%d", row + 1, height)
            if progress is not None:
                progress(row + 1, height)

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return image
