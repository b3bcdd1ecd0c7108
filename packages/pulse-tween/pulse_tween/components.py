"""Timeline steps, the immutable Timeline value, and its builder."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from pulse_tween.easing import Easing, linear, resolve_easing
from pulse_tween.types import InvalidDurationError


@dataclass(frozen=True)
class Wait:
    """Hold the target unchanged for ``duration`` ms."""

    duration: float


@dataclass(frozen=True)
class TransitionTo:
    """Move each listed field to its terminal value over ``duration`` ms."""

    values: tuple[tuple[str, float], ...]
    duration: float
    easing: Easing = linear


Step = Union[Wait, TransitionTo]


@dataclass(frozen=True)
class Timeline:
    steps: tuple[Step, ...] = ()

    @property
    def total_duration(self) -> float:
        return sum(step.duration for step in self.steps)

    @property
    def fields(self) -> tuple[str, ...]:
        """Every field some step animates, in first-seen order."""
        seen: dict[str, None] = {}
        for step in self.steps:
            if isinstance(step, TransitionTo):
                for name, _ in step.values:
                    seen.setdefault(name)
        return tuple(seen)

    def step_windows(self) -> list[tuple[float, float]]:
        """(begin, end) of every step, in ms relative to the timeline start."""
        windows = []
        begin = 0.0
        for step in self.steps:
            end = begin + step.duration
            windows.append((begin, end))
            begin = end
        return windows


def _check_duration(ms: float) -> float:
    if isinstance(ms, bool) or not isinstance(ms, (int, float)):
        raise InvalidDurationError(ms)
    if not math.isfinite(ms) or ms < 0:
        raise InvalidDurationError(ms)
    return float(ms)


class TimelineBuilder:
    """Accumulates steps; ``build()`` freezes them into a Timeline."""

    def __init__(self) -> None:
        self._steps: list[Step] = []

    def wait(self, ms: float) -> TimelineBuilder:
        self._steps.append(Wait(_check_duration(ms)))
        return self

    def to(
        self,
        values: Mapping[str, float],
        ms: float = 0,
        easing: str | Easing = "linear",
    ) -> TimelineBuilder:
        if not values:
            raise ValueError("a transition needs at least one field")
        duration = _check_duration(ms)
        terminals = tuple((name, float(v)) for name, v in values.items())
        for name, v in terminals:
            if not math.isfinite(v):
                raise ValueError(f"terminal value for {name!r} must be finite, got {v!r}")
        self._steps.append(
            TransitionTo(
                values=terminals,
                duration=duration,
                easing=resolve_easing(easing),
            )
        )
        return self

    transition_to = to

    def build(self) -> Timeline:
        return Timeline(steps=tuple(self._steps))


def create_timeline() -> TimelineBuilder:
    return TimelineBuilder()


@dataclass
class Track:
    """A Timeline bound to one target and armed at ``start_time`` (ms)."""

    timeline: Timeline
    target: Any
    start_time: float
    origin: dict[str, float]
    finished: bool = False


@dataclass
class Animator:
    """Component holding every Track that drives one entity."""

    tracks: list[Track] = field(default_factory=list)
