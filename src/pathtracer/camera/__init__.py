"""Camera models for primary ray generation."""

from pathtracer.camera.lens import Camera, CameraParams

__all__ = ["Camera", "CameraParams"]
