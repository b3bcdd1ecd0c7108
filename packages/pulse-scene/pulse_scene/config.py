"""Scene configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SceneConfig:
    """Immutable constants for the pulsing sphere scene.

    Durations are in milliseconds, angles in radians, colors are RGB.

    Attributes:
        point_count: Lattice rows passed to the distributor (one fewer
            point is placed).
        point_radius: Radius of each rendered point, in scene units.
        group_rotation: Initial (x, y, z) Euler rotation of the group.
        spin_rate: Rotation added to the group's x and y per ms.
        stagger_ms: Extra pulse delay per point index.
        intro_hold_ms: Time points stay collapsed before flying out.
        intro_ms: Duration of the fly-out to lattice positions.
        settle_ms: Elastic hold before the first pulse.
        pulse_up_ms: Duration of a pulse to ``pulse_factor`` scale.
        pulse_down_ms: Duration of the return to rest scale.
        pulse_gap_ms: Rest time between the two pulses.
        collapse_delay_ms: Time before the whole group shrinks away.
        collapse_ms: Duration of the group shrink.
        reveal_delay_ms: Time before connecting lines start fading in.
        reveal_ms: Duration of the line fade-in.
    """

    point_count: int = 89
    point_radius: float = 0.03
    point_color: tuple[int, int, int] = (0, 0, 0)
    line_color: tuple[int, int, int] = (0, 0, 0)
    background: tuple[int, int, int] = (255, 255, 255)
    group_rotation: tuple[float, float, float] = (10.0, 0.0, 0.0)
    spin_rate: float = -0.005 * 60 / 1000
    stagger_ms: float = 15.0
    intro_hold_ms: float = 1000.0
    intro_ms: float = 1000.0
    settle_ms: float = 5000.0
    pulse_factor: float = 2.0
    pulse_up_ms: float = 150.0
    pulse_down_ms: float = 100.0
    pulse_gap_ms: float = 5000.0
    collapse_delay_ms: float = 15000.0
    collapse_ms: float = 1000.0
    reveal_delay_ms: float = 2000.0
    reveal_ms: float = 1500.0
    camera_position: tuple[float, float, float] = (0.0, 0.0, -4.0)
    fov: float = 45.0
    near: float = 1.0
    far: float = 8000.0

    def validate(self) -> None:
        if self.point_count < 1:
            raise ValueError("point_count must be positive")
        if self.point_radius <= 0:
            raise ValueError("point_radius must be positive")
        durations = {
            "stagger_ms": self.stagger_ms,
            "intro_hold_ms": self.intro_hold_ms,
            "intro_ms": self.intro_ms,
            "settle_ms": self.settle_ms,
            "pulse_up_ms": self.pulse_up_ms,
            "pulse_down_ms": self.pulse_down_ms,
            "pulse_gap_ms": self.pulse_gap_ms,
            "collapse_delay_ms": self.collapse_delay_ms,
            "collapse_ms": self.collapse_ms,
            "reveal_delay_ms": self.reveal_delay_ms,
            "reveal_ms": self.reveal_ms,
        }
        for name, value in durations.items():
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be >= 0, got {value!r}")
        if not 0 < self.near < self.far:
            raise ValueError("near and far must satisfy 0 < near < far")
