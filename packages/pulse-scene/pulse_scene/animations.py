"""Timeline factories for the pulsing sphere."""
from __future__ import annotations

from pulse_tween import Timeline, create_timeline

from pulse_scene.components import Vector3
from pulse_scene.config import SceneConfig


def _xyz(v: Vector3, factor: float = 1.0) -> dict[str, float]:
    return {"x": v.x * factor, "y": v.y * factor, "z": v.z * factor}


def intro_timeline(home: Vector3, config: SceneConfig) -> Timeline:
    """Collapse a point to the origin, then spring it out to ``home``."""
    return (
        create_timeline()
        .to({"x": 0.0, "y": 0.0, "z": 0.0})
        .wait(config.intro_hold_ms)
        .to(_xyz(home), config.intro_ms, "back_out")
        .build()
    )


def pulse_timeline(rest: Vector3, index: int, config: SceneConfig) -> Timeline:
    """Two scale pulses, delayed by the point's index so the wave sweeps the cloud."""
    up = _xyz(rest, config.pulse_factor)
    down = _xyz(rest)
    return (
        create_timeline()
        .to(down, config.settle_ms, "elastic_in")
        .wait(index * config.stagger_ms)
        .to(up, config.pulse_up_ms, "elastic_out")
        .to(down, config.pulse_down_ms, "elastic_in")
        .wait(config.pulse_gap_ms)
        .to(up, config.pulse_up_ms, "elastic_out")
        .to(down, config.pulse_down_ms, "elastic_in")
        .build()
    )


def collapse_timeline(config: SceneConfig) -> Timeline:
    """Shrink the whole group out of sight."""
    return (
        create_timeline()
        .wait(config.collapse_delay_ms)
        .to({"x": 0.0, "y": 0.0, "z": 0.0}, config.collapse_ms, "back_in")
        .build()
    )


def reveal_timeline(config: SceneConfig) -> Timeline:
    """Fade the connecting lines in from fully transparent."""
    return (
        create_timeline()
        .to({"value": 0.0})
        .wait(config.reveal_delay_ms)
        .to({"value": 1.0}, config.reveal_ms, "ease_in_out")
        .build()
    )
