"""pulse-scene - Assembles the pulsing sphere point cloud for a 3D host."""
from __future__ import annotations

from pulse_scene.assembly import (
    PointCloudGroup,
    fill_scene,
    line_segments,
    point_radii,
    world_positions,
)
from pulse_scene.components import GroupTag, PointTag, Spin, Transform, Uniform, Vector3
from pulse_scene.config import SceneConfig
from pulse_scene.projection import OrbitCamera
from pulse_scene.systems import make_spin_system

__all__ = [
    "PointCloudGroup",
    "fill_scene",
    "line_segments",
    "point_radii",
    "world_positions",
    "GroupTag",
    "PointTag",
    "Spin",
    "Transform",
    "Uniform",
    "Vector3",
    "SceneConfig",
    "OrbitCamera",
    "make_spin_system",
]
