"""Offline Monte Carlo path tracer.

Subpackages:
    core: Vector math, rays, the radiance estimator and the parallel renderer
    geometry: Shapes, transforms, volumes and the BVH
    textures: Solid, checker, image and Perlin noise textures
    materials: Diffuse, metal, glass, emissive and volume scattering
    camera: Thin-lens camera with motion blur
    scene: Demonstration scenes
    preview: PPM/PNG export and preview display
"""

__version__ = "0.1.0"
