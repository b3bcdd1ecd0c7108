"""System factory for timeline evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pulse_tween.components import Animator, Track
from pulse_tween.evaluate import apply

if TYPE_CHECKING:
    from pulse import EntityId, FrameContext, World


def make_timeline_system(
    on_complete: Callable[[World, FrameContext, EntityId, Track], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that samples every live Track at the frame's clock time.

    A Track that reaches its terminal state is marked finished and never
    sampled again. Once all of an entity's tracks finish, its Animator is
    detached.
    """

    def timeline_system(world: World, ctx: FrameContext) -> None:
        for eid, (animator,) in list(world.query(Animator)):
            for track in animator.tracks:
                if track.finished:
                    continue
                if apply(track, ctx.now):
                    track.finished = True
                    if on_complete is not None:
                        on_complete(world, ctx, eid, track)

            if all(track.finished for track in animator.tracks):
                world.detach(eid, Animator)

    return timeline_system
