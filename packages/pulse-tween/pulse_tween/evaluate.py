"""Pure, time-addressed evaluation of armed timelines.

Nothing here keeps a frame counter: every call replays the step list from
the values captured when the track was armed, so sampling the same ``now``
twice, or skipping whole steps between samples, gives the same answer.
"""
from __future__ import annotations

from typing import Any

from pulse_tween.components import Timeline, Track, TransitionTo
from pulse_tween.types import TargetFieldError


def arm(timeline: Timeline, target: Any, now: float) -> Track:
    """Bind ``timeline`` to ``target`` starting at clock time ``now``."""
    origin: dict[str, float] = {}
    for name in timeline.fields:
        try:
            origin[name] = float(getattr(target, name))
        except AttributeError:
            raise TargetFieldError(target, name) from None
    return Track(timeline=timeline, target=target, start_time=now, origin=origin)


def elapsed_at(track: Track, now: float) -> float:
    # Samples taken before the start behave like the start itself.
    return max(0.0, now - track.start_time)


def current_step_index(track: Track, now: float) -> int:
    """Index of the step active at ``now``; ``len(steps)`` once terminal."""
    elapsed = elapsed_at(track, now)
    for index, (_, end) in enumerate(track.timeline.step_windows()):
        if elapsed < end:
            return index
    return len(track.timeline.steps)


def is_terminal(track: Track, now: float) -> bool:
    return elapsed_at(track, now) >= track.timeline.total_duration


def evaluate(track: Track, now: float) -> dict[str, float]:
    """Value of every animated field at ``now``."""
    elapsed = elapsed_at(track, now)
    values = dict(track.origin)
    begin = 0.0
    for step in track.timeline.steps:
        end = begin + step.duration
        if elapsed < end:
            if isinstance(step, TransitionTo):
                eased = step.easing((elapsed - begin) / step.duration)
                for name, terminal in step.values:
                    start = values[name]
                    values[name] = start + (terminal - start) * eased
            return values
        if isinstance(step, TransitionTo):
            values.update(step.values)
        begin = end
    return values


def apply(track: Track, now: float) -> bool:
    """Write the values at ``now`` onto the target. Returns True once terminal."""
    for name, value in evaluate(track, now).items():
        setattr(track.target, name, value)
    return is_terminal(track, now)
