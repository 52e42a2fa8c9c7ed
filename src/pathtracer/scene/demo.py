"""Demonstration scenes.

Each builder returns a SceneDescription holding the primitive list, a camera
framed for the scene and the background radiance. The objects are not yet
organized into a BVH; call ``SceneDescription.world()`` for that.

Scenes:
    random_scene: Many small random spheres around three large ones.
    two_spheres: Two checkered spheres.
    two_perlin_spheres: Ground and sphere with marble noise.
    earth: A globe with an image texture.
    simple_light: Noise spheres lit by a rectangular area light.
    cornell_box: The classic box with two rotated blocks.
    cornell_smoke: Cornell box with the blocks replaced by smoke.
    final_scene: Every feature at once.

Example:
    >>> import numpy as np
    >>> from pathtracer.scene.demo import cornell_box
    >>> scene = cornell_box()
    >>> world = scene.world(np.random.default_rng(0))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

import numpy as np

from pathtracer.camera.lens import Camera, CameraParams
from pathtracer.core.vec3 import Color, Point3, Vec3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import build_bvh
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.textures.checker import CheckerTexture
from pathtracer.textures.image import ImageTexture
from pathtracer.textures.perlin import NoiseTexture

logger = logging.getLogger(__name__)

SKY = Vec3(0.7, 0.8, 1.0)
DARK = Vec3(0.0, 0.0, 0.0)

DEFAULT_EARTH_IMAGE = "earthmap.jpg"

# Shutter interval shared by every demo camera and BVH build
SHUTTER_OPEN = 0.0
SHUTTER_CLOSE = 1.0


@dataclass
class SceneDescription:
    """Scene contents ready to render.

    Attributes:
        objects: Primitives making up the scene.
        camera: Camera framed for the scene.
        background: Radiance for rays that escape the scene.
    """

    objects: list[Hittable]
    camera: Camera
    background: Color

    def world(self, rng: np.random.Generator | None = None) -> Hittable:
        """Organize the objects into a BVH over the camera's shutter interval."""
        return build_bvh(self.objects, self.camera.time0, self.camera.time1, rng)


def _camera(
    look_from: Point3,
    look_at: Point3,
    vfov: float,
    aspect_ratio: float,
    aperture: float = 0.0,
) -> Camera:
    return Camera(
        CameraParams(
            look_from=look_from,
            look_at=look_at,
            vup=Vec3(0.0, 1.0, 0.0),
            vfov=vfov,
            aspect_ratio=aspect_ratio,
            aperture=aperture,
            focus_dist=10.0,
            time0=SHUTTER_OPEN,
            time1=SHUTTER_CLOSE,
        )
    )


def _outdoor_camera(aspect_ratio: float, aperture: float = 0.0) -> Camera:
    return _camera(Vec3(13.0, 2.0, 3.0), Vec3(0.0, 0.0, 0.0), 20.0, aspect_ratio, aperture)


def _cornell_camera(aspect_ratio: float) -> Camera:
    return _camera(Vec3(278.0, 278.0, -800.0), Vec3(278.0, 278.0, 0.0), 40.0, aspect_ratio)


def _ground_checker() -> CheckerTexture:
    return CheckerTexture.from_colors(Vec3(0.2, 0.3, 0.1), Vec3(0.9, 0.9, 0.9))


# =============================================================================
# Outdoor Scenes
# =============================================================================


def random_scene(
    aspect_ratio: float = 16.0 / 9.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    """Grid of small random spheres (diffuse movers, metal, glass) plus three large ones."""
    if rng is None:
        rng = np.random.default_rng()

    objects: list[Hittable] = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(_ground_checker()))
    ]

    clearance_point = Vec3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vec3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance_point).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vec3.random(rng) * Vec3.random(rng)
                center2 = center + Vec3(0.0, rng.uniform(0.0, 0.5), 0.0)
                objects.append(
                    MovingSphere(
                        center,
                        center2,
                        SHUTTER_OPEN,
                        SHUTTER_CLOSE,
                        0.2,
                        Lambertian.from_color(albedo),
                    )
                )
            elif choose_mat < 0.95:
                albedo = Vec3.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0.0, 0.5)
                objects.append(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                objects.append(Sphere(center, 0.2, Dielectric(1.5)))

    objects.append(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian.from_color(Vec3(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))

    logger.debug("random_scene generated %d objects", len(objects))
    return SceneDescription(objects, _outdoor_camera(aspect_ratio, aperture=0.1), SKY)


def two_spheres(
    aspect_ratio: float = 16.0 / 9.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    checker = _ground_checker()
    objects: list[Hittable] = [
        Sphere(Vec3(0.0, -10.0, 0.0), 10.0, Lambertian(checker)),
        Sphere(Vec3(0.0, 10.0, 0.0), 10.0, Lambertian(checker)),
    ]
    return SceneDescription(objects, _outdoor_camera(aspect_ratio), SKY)


def two_perlin_spheres(
    aspect_ratio: float = 16.0 / 9.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    marble = Lambertian(NoiseTexture(4.0, rng))
    objects: list[Hittable] = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, marble),
        Sphere(Vec3(0.0, 2.0, 0.0), 2.0, marble),
    ]
    return SceneDescription(objects, _outdoor_camera(aspect_ratio), SKY)


def earth(
    aspect_ratio: float = 16.0 / 9.0,
    rng: np.random.Generator | None = None,
    earth_image: str | PathLike[str] = DEFAULT_EARTH_IMAGE,
) -> SceneDescription:
    """Textured globe.

    Raises:
        TextureLoadError: If ``earth_image`` cannot be decoded.
    """
    surface = Lambertian(ImageTexture.from_file(earth_image))
    objects: list[Hittable] = [Sphere(Vec3(0.0, 0.0, 0.0), 2.0, surface)]
    return SceneDescription(objects, _outdoor_camera(aspect_ratio), SKY)


def simple_light(
    aspect_ratio: float = 16.0 / 9.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    marble = Lambertian(NoiseTexture(4.0, rng))
    objects: list[Hittable] = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, marble),
        Sphere(Vec3(0.0, 2.0, 0.0), 2.0, marble),
        XYRect(3.0, 5.0, 1.0, 3.0, -2.0, DiffuseLight.from_color(Vec3(4.0, 4.0, 4.0))),
    ]
    camera = _camera(Vec3(26.0, 3.0, 6.0), Vec3(0.0, 2.0, 0.0), 20.0, aspect_ratio)
    return SceneDescription(objects, camera, DARK)


# =============================================================================
# Cornell Box Scenes
# =============================================================================


def _cornell_walls(light: DiffuseLight, light_extent: tuple[float, float, float, float]):
    red = Lambertian.from_color(Vec3(0.65, 0.05, 0.05))
    white = Lambertian.from_color(Vec3(0.73, 0.73, 0.73))
    green = Lambertian.from_color(Vec3(0.12, 0.45, 0.15))
    x0, x1, z0, z1 = light_extent

    walls: list[Hittable] = [
        YZRect(0.0, 555.0, 0.0, 555.0, 555.0, green),
        YZRect(0.0, 555.0, 0.0, 555.0, 0.0, red),
        XZRect(x0, x1, z0, z1, 554.0, light),
        XZRect(0.0, 555.0, 0.0, 555.0, 0.0, white),
        XZRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
        XYRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
    ]
    return walls, white


def _cornell_blocks(white: Lambertian) -> tuple[Hittable, Hittable]:
    tall = Translate(
        RotateY(Box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 330.0, 165.0), white), 15.0),
        Vec3(265.0, 0.0, 295.0),
    )
    short = Translate(
        RotateY(Box(Vec3(0.0, 0.0, 0.0), Vec3(165.0, 165.0, 165.0), white), -18.0),
        Vec3(130.0, 0.0, 65.0),
    )
    return tall, short


def cornell_box(
    aspect_ratio: float = 1.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    light = DiffuseLight.from_color(Vec3(15.0, 15.0, 15.0))
    objects, white = _cornell_walls(light, (213.0, 343.0, 227.0, 332.0))
    objects.extend(_cornell_blocks(white))
    return SceneDescription(objects, _cornell_camera(aspect_ratio), DARK)


def cornell_smoke(
    aspect_ratio: float = 1.0,
    rng: np.random.Generator | None = None,
) -> SceneDescription:
    light = DiffuseLight.from_color(Vec3(7.0, 7.0, 7.0))
    objects, white = _cornell_walls(light, (113.0, 443.0, 127.0, 432.0))
    tall, short = _cornell_blocks(white)
    objects.append(ConstantMedium(tall, 0.01, Vec3(0.0, 0.0, 0.0)))
    objects.append(ConstantMedium(short, 0.01, Vec3(1.0, 1.0, 1.0)))
    return SceneDescription(objects, _cornell_camera(aspect_ratio), DARK)


# =============================================================================
# Final Scene
# =============================================================================


def final_scene(
    aspect_ratio: float = 1.0,
    rng: np.random.Generator | None = None,
    earth_image: str | PathLike[str] = DEFAULT_EARTH_IMAGE,
) -> SceneDescription:
    """Ground of random-height boxes, assorted spheres, fog and a sphere cluster.

    The box field and the sphere cluster are each organized into their own
    BVH and placed in the scene as single primitives.

    Raises:
        TextureLoadError: If ``earth_image`` cannot be decoded.
    """
    if rng is None:
        rng = np.random.default_rng()

    objects: list[Hittable] = [
        XZRect(123.0, 423.0, 147.0, 412.0, 554.0, DiffuseLight.from_color(Vec3(7.0, 7.0, 7.0)))
    ]

    ground = Lambertian.from_color(Vec3(0.48, 0.83, 0.53))
    boxes_per_side = 20
    width = 100.0
    ground_boxes: list[Hittable] = []
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * width
            z0 = -1000.0 + j * width
            y1 = rng.uniform(1.0, 101.0)
            ground_boxes.append(Box(Vec3(x0, 0.0, z0), Vec3(x0 + width, y1, z0 + width), ground))
    objects.append(build_bvh(ground_boxes, SHUTTER_OPEN, SHUTTER_CLOSE, rng))

    objects.append(
        MovingSphere(
            Vec3(400.0, 400.0, 200.0),
            Vec3(430.0, 400.0, 200.0),
            SHUTTER_OPEN,
            SHUTTER_CLOSE,
            50.0,
            Lambertian.from_color(Vec3(0.7, 0.3, 0.1)),
        )
    )
    objects.append(Sphere(Vec3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    objects.append(Sphere(Vec3(0.0, 150.0, 145.0), 50.0, Metal(Vec3(0.8, 0.8, 0.9), 1.0)))

    # Glass shell filled with blue subsurface haze
    boundary = Sphere(Vec3(360.0, 150.0, 145.0), 70.0, Dielectric(1.5))
    objects.append(boundary)
    objects.append(ConstantMedium(boundary, 0.2, Vec3(0.2, 0.4, 0.9)))

    # Thin mist enclosing the whole scene
    mist_boundary = Sphere(Vec3(0.0, 0.0, 5.0), 5000.0, Dielectric(1.5))
    objects.append(ConstantMedium(mist_boundary, 0.0001, Vec3(1.0, 1.0, 1.0)))

    objects.append(
        Sphere(Vec3(400.0, 200.0, 400.0), 100.0, Lambertian(ImageTexture.from_file(earth_image)))
    )
    objects.append(Sphere(Vec3(220.0, 280.0, 300.0), 80.0, Lambertian(NoiseTexture(0.1, rng))))

    white = Lambertian.from_color(Vec3(0.73, 0.73, 0.73))
    cluster: list[Hittable] = [
        Sphere(Vec3.random(rng, 0.0, 165.0), 10.0, white) for _ in range(1000)
    ]
    objects.append(
        Translate(
            RotateY(build_bvh(cluster, SHUTTER_OPEN, SHUTTER_CLOSE, rng), 15.0),
            Vec3(-100.0, 270.0, 395.0),
        )
    )

    camera = _camera(Vec3(478.0, 278.0, -600.0), Vec3(278.0, 278.0, 0.0), 40.0, aspect_ratio)
    return SceneDescription(objects, camera, DARK)


# =============================================================================
# Scene Registry
# =============================================================================

SceneBuilder = Callable[..., SceneDescription]

SCENES: dict[str, SceneBuilder] = {
    "random": random_scene,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final": final_scene,
}

# Scenes that read the earth texture from disk
IMAGE_SCENES = frozenset({"earth", "final"})


def build_scene(
    name: str,
    aspect_ratio: float,
    rng: np.random.Generator | None = None,
    earth_image: str | PathLike[str] = DEFAULT_EARTH_IMAGE,
) -> SceneDescription:
    """Build a demo scene by its registry name.

    Args:
        name: Key of SCENES.
        aspect_ratio: Image width over height, used to frame the camera.
        rng: Random stream for scene generation.
        earth_image: Texture path for scenes that use the globe image.

    Returns:
        The scene description.

    Raises:
        ValueError: If ``name`` is not a known scene.
        TextureLoadError: If an image scene cannot load ``earth_image``.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(
            f"Unknown scene {name!r}; choose one of {', '.join(sorted(SCENES))}"
        ) from None

    if name in IMAGE_SCENES:
        return builder(aspect_ratio, rng, earth_image=earth_image)
    return builder(aspect_ratio, rng)
