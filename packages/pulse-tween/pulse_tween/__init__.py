"""pulse-tween - Time-sequenced property animation for the pulse frame loop."""
from __future__ import annotations

from pulse_tween.components import (
    Animator,
    Step,
    Timeline,
    TimelineBuilder,
    Track,
    TransitionTo,
    Wait,
    create_timeline,
)
from pulse_tween.easing import EASINGS, resolve_easing
from pulse_tween.evaluate import (
    apply,
    arm,
    current_step_index,
    evaluate,
    is_terminal,
)
from pulse_tween.systems import make_timeline_system
from pulse_tween.types import InvalidDurationError, TargetFieldError

__all__ = [
    "Animator",
    "Step",
    "Timeline",
    "TimelineBuilder",
    "Track",
    "TransitionTo",
    "Wait",
    "create_timeline",
    "EASINGS",
    "resolve_easing",
    "apply",
    "arm",
    "current_step_index",
    "evaluate",
    "is_terminal",
    "make_timeline_system",
    "InvalidDurationError",
    "TargetFieldError",
]
