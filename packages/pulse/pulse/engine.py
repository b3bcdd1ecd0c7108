"""Engine - frame loop, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from pulse.clock import Clock
from pulse.types import FrameContext, System
from pulse.world import World

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, clock: Clock | None = None, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._clock = clock if clock is not None else Clock()
        self._fps = fps
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def fps(self) -> int:
        return self._fps

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self) -> None:
        # One clock sample per frame, shared by every system.
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def _run_hooks(self, hooks: list[Callable[[World, FrameContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._world, ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.debug("frame loop started at %d fps", self._fps)

        budget = 1.0 / self._fps
        while not self._stop_requested:
            start = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = budget - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.debug("frame loop stopped after %d frames", self._clock.frame_number)
        self._run_hooks(self._stop_hooks)
