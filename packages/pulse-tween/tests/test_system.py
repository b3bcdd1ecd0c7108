"""Tests for the timeline system driven by the frame loop."""

from dataclasses import dataclass

from pulse import Engine, ManualClock
from pulse_tween import Animator, arm, create_timeline, make_timeline_system


@dataclass
class Opacity:
    """Test component for a scalar target."""

    value: float = 0.0


def make_opacity_engine(duration: float = 100.0):
    clock = ManualClock()
    engine = Engine(clock=clock)
    world = engine.world
    eid = world.spawn()
    opacity = Opacity()
    world.attach(eid, opacity)
    track = arm(create_timeline().to({"value": 1.0}, duration).build(), opacity, now=0.0)
    world.attach(eid, Animator([track]))
    return clock, engine, eid, opacity, track


class TestTimelineSystem:
    """Test per-frame application of tracks."""

    def test_applies_at_frame_time(self):
        """A frame at 40ms puts a linear 100ms track at 40%."""
        clock, engine, _, opacity, _ = make_opacity_engine()
        engine.add_system(make_timeline_system())
        clock.set(40.0)
        engine.step()
        assert abs(opacity.value - 0.4) < 1e-9

    def test_independent_of_frame_cadence(self):
        """Few large frames and many small frames end in the same place."""
        clock_a, engine_a, _, opacity_a, _ = make_opacity_engine()
        clock_b, engine_b, _, opacity_b, _ = make_opacity_engine()
        engine_a.add_system(make_timeline_system())
        engine_b.add_system(make_timeline_system())

        clock_a.set(70.0)
        engine_a.step()
        for _ in range(7):
            clock_b.tick(10.0)
            engine_b.step()
        assert opacity_a.value == opacity_b.value

    def test_detaches_animator_when_done(self):
        clock, engine, eid, opacity, track = make_opacity_engine()
        engine.add_system(make_timeline_system())
        clock.set(150.0)
        engine.step()
        assert opacity.value == 1.0
        assert track.finished
        assert not engine.world.has(eid, Animator)

    def test_on_complete_fires_once(self):
        clock, engine, eid, _, track = make_opacity_engine()
        completed = []

        def on_complete(world, ctx, entity, done):
            completed.append((entity, done, ctx.now))

        engine.add_system(make_timeline_system(on_complete=on_complete))
        for t in (50.0, 120.0, 200.0):
            clock.set(t)
            engine.step()
        assert completed == [(eid, track, 120.0)]

    def test_finished_track_is_not_sampled(self):
        """After finishing, outside writes to the target are left alone."""
        clock, engine, eid, opacity, track = make_opacity_engine()
        other = Opacity()
        long_track = arm(create_timeline().wait(1000).build(), other, now=0.0)
        engine.world.get(eid, Animator).tracks.append(long_track)
        engine.add_system(make_timeline_system())

        clock.set(150.0)
        engine.step()
        assert track.finished and not long_track.finished
        opacity.value = 0.25
        clock.set(300.0)
        engine.step()
        assert opacity.value == 0.25
        assert engine.world.has(eid, Animator)

    def test_empty_animator_is_detached(self):
        clock, engine, _, _, _ = make_opacity_engine()
        eid = engine.world.spawn()
        engine.world.attach(eid, Animator())
        engine.add_system(make_timeline_system())
        engine.step()
        assert not engine.world.has(eid, Animator)
