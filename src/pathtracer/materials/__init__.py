"""Materials describing how light scatters at surfaces and inside volumes."""

from pathtracer.materials.base import Material, ScatterRecord
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

__all__ = [
    "Dielectric",
    "DiffuseLight",
    "Isotropic",
    "Lambertian",
    "Material",
    "Metal",
    "ScatterRecord",
]
