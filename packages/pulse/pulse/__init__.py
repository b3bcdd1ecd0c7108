"""pulse - A minimal frame loop driven by one shared millisecond clock."""

from pulse.clock import Clock, ManualClock
from pulse.engine import Engine
from pulse.types import DeadEntityError, EntityId, FrameContext
from pulse.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "ManualClock",
    "FrameContext",
    "EntityId",
    "DeadEntityError",
]
