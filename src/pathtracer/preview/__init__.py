"""Output and visualization of finished renders.

Components:
    export: PPM and PNG writers
    display: Matplotlib preview window
"""

from pathtracer.preview.display import show_preview
from pathtracer.preview.export import save_image, save_png, save_ppm, write_ppm

__all__ = [
    "save_image",
    "save_png",
    "save_ppm",
    "show_preview",
    "write_ppm",
]
