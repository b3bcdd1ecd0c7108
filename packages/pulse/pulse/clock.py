"""Shared millisecond clock and FrameContext generation."""

import time
from typing import Callable

from pulse.types import FrameContext


class Clock:
    """Monotonic wall clock reporting milliseconds since its own epoch.

    The epoch is the moment the clock is created. Every sample is clamped
    to the previous one, so a skewed source never makes time run backwards.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._epoch = source()
        self._last = 0.0
        self._frame_time = 0.0
        self._dt = 0.0
        self._frame_number = 0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def frame_time(self) -> float:
        """Time of the most recent frame, in ms."""
        return self._frame_time

    @property
    def dt(self) -> float:
        return self._dt

    def _sample(self) -> float:
        return (self._source() - self._epoch) * 1000.0

    def now(self) -> float:
        sample = self._sample()
        if sample > self._last:
            self._last = sample
        return self._last

    def advance(self) -> int:
        current = self.now()
        self._dt = current - self._frame_time
        self._frame_time = current
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            now=self._frame_time,
            dt=self._dt,
            request_stop=stop_fn,
        )


class ManualClock(Clock):
    """Clock whose time only moves when told to. Used for tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._manual = float(start)
        super().__init__(source=lambda: 0.0)
        self._last = self._manual
        self._frame_time = self._manual

    def _sample(self) -> float:
        return self._manual

    def set(self, ms: float) -> None:
        self._manual = float(ms)

    def tick(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("ms must be non-negative")
        self._manual += ms
        return self._manual
