"""Scene components. Vector3 and Uniform are the animation targets."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def copy(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


@dataclass
class Uniform:
    """A shared scalar read by the renderer every frame."""

    value: float = 0.0


@dataclass
class Transform:
    position: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)


@dataclass
class PointTag:
    """Marks a lattice point. ``index`` is its position along the spiral."""

    index: int


@dataclass
class GroupTag:
    pass


@dataclass
class Spin:
    """Constant angular velocity, radians per ms, applied to x and y."""

    rate: float
