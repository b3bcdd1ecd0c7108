"""Orbit camera and perspective projection onto a pixel viewport."""
from __future__ import annotations

import math
from dataclasses import dataclass

from pulse_scene import vec

_PITCH_LIMIT = math.pi / 2 - 0.01
_MIN_DISTANCE = 1.5
_MAX_DISTANCE = 50.0


@dataclass
class OrbitCamera:
    """Camera orbiting ``target`` at ``distance``.

    ``yaw`` and ``pitch`` are measured from the -z axis, so the default
    camera sits at (0, 0, -distance) looking at the origin.
    """

    distance: float = 4.0
    yaw: float = 0.0
    pitch: float = 0.0
    fov: float = 45.0
    near: float = 1.0
    far: float = 8000.0
    target: vec.Vec3 = (0.0, 0.0, 0.0)

    @classmethod
    def looking_from(
        cls, position: vec.Vec3, fov: float = 45.0, near: float = 1.0, far: float = 8000.0
    ) -> OrbitCamera:
        distance = vec.magnitude(position)
        if distance == 0.0:
            raise ValueError("camera position must differ from the target")
        x, y, z = position
        pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, math.asin(y / distance)))
        yaw = math.atan2(x, -z)
        return cls(distance=distance, yaw=yaw, pitch=pitch, fov=fov, near=near, far=far)

    def orbit(self, d_yaw: float, d_pitch: float) -> None:
        self.yaw = (self.yaw + d_yaw) % (2 * math.pi)
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch + d_pitch))

    def zoom(self, factor: float) -> None:
        if factor <= 0:
            raise ValueError("zoom factor must be positive")
        self.distance = max(_MIN_DISTANCE, min(_MAX_DISTANCE, self.distance * factor))

    def eye(self) -> vec.Vec3:
        cp = math.cos(self.pitch)
        offset = (
            self.distance * cp * math.sin(self.yaw),
            self.distance * math.sin(self.pitch),
            -self.distance * cp * math.cos(self.yaw),
        )
        return vec.add(self.target, offset)

    def _basis(self) -> tuple[vec.Vec3, vec.Vec3, vec.Vec3]:
        forward = vec.normalize(vec.sub(self.target, self.eye()))
        right = vec.normalize(vec.cross(forward, (0.0, 1.0, 0.0)))
        up = vec.cross(right, forward)
        return right, up, forward

    def project(
        self, point: vec.Vec3, width: int, height: int
    ) -> tuple[float, float, float] | None:
        """Screen (x, y) in pixels plus view depth, or None outside near/far."""
        right, up, forward = self._basis()
        rel = vec.sub(point, self.eye())
        depth = vec.dot(rel, forward)
        if depth < self.near or depth > self.far:
            return None
        focal = (height / 2) / math.tan(math.radians(self.fov) / 2)
        sx = width / 2 + vec.dot(rel, right) * focal / depth
        sy = height / 2 - vec.dot(rel, up) * focal / depth
        return (sx, sy, depth)

    def pixel_scale(self, depth: float, height: int) -> float:
        """Pixels per scene unit at ``depth``."""
        return (height / 2) / math.tan(math.radians(self.fov) / 2) / depth
