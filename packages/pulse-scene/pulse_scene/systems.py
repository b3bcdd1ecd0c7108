"""System factories for scene motion that is not timeline-driven."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pulse_scene.components import Spin, Transform

if TYPE_CHECKING:
    from pulse import FrameContext, World


def make_spin_system() -> Callable[[World, FrameContext], None]:
    """Return a system that turns every Spin entity by ``rate * dt`` on x and y."""

    def spin_system(world: World, ctx: FrameContext) -> None:
        for _eid, (spin, transform) in world.query(Spin, Transform):
            delta = spin.rate * ctx.dt
            transform.rotation.x += delta
            transform.rotation.y += delta

    return spin_system
