"""Errors raised while building or arming timelines."""
from __future__ import annotations


class InvalidDurationError(ValueError):
    """Raised when a step is given a negative or non-finite duration."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        super().__init__(f"step duration must be a finite value >= 0, got {duration!r}")


class TargetFieldError(AttributeError):
    """Raised when a timeline animates a field its target does not expose."""

    def __init__(self, target: object, field: str) -> None:
        self.target = target
        self.field = field
        super().__init__(
            f"{type(target).__name__} has no numeric field {field!r} to animate"
        )
