"""Scene builders."""

from pathtracer.scene.demo import SCENES, SceneDescription, build_scene

__all__ = ["SCENES", "SceneDescription", "build_scene"]
