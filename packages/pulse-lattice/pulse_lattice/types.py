"""Shared types for pulse-lattice."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SpherePoint:
    """A coordinate on the unit sphere, indexed by its position in the spiral."""

    index: int
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


class InvalidCountError(ValueError):
    """Raised when a distribution is requested for fewer than one point."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"count must be a positive integer, got {count!r}")
