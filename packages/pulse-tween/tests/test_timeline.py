"""Tests for step construction and the Timeline value."""

import math

import pytest
from pulse_tween import (
    EASINGS,
    InvalidDurationError,
    Timeline,
    TransitionTo,
    Wait,
    create_timeline,
)


class TestBuilder:
    """Test the chained step builder."""

    def test_empty_timeline(self):
        """A fresh builder builds a timeline with no steps."""
        timeline = create_timeline().build()
        assert timeline.steps == ()
        assert timeline.total_duration == 0.0

    def test_steps_in_order(self):
        """Steps appear in the order they were chained."""
        timeline = (
            create_timeline()
            .wait(1000)
            .to({"v": 1.0}, 500, "ease_out")
            .wait(250)
            .build()
        )
        kinds = [type(step) for step in timeline.steps]
        assert kinds == [Wait, TransitionTo, Wait]
        assert timeline.total_duration == 1750.0

    def test_transition_defaults(self):
        """to() defaults to an instant, linear step."""
        step = create_timeline().to({"x": 2}).build().steps[0]
        assert step.duration == 0.0
        assert step.easing is EASINGS["linear"]
        assert step.values == (("x", 2.0),)

    def test_transition_to_alias(self):
        """transition_to is the same operation as to."""
        a = create_timeline().to({"x": 1}, 10).build()
        b = create_timeline().transition_to({"x": 1}, 10).build()
        assert a == b

    def test_build_freezes_steps(self):
        """Later chaining does not alter an already-built timeline."""
        builder = create_timeline().wait(10)
        first = builder.build()
        builder.wait(20)
        assert len(first.steps) == 1
        assert isinstance(first, Timeline)
        with pytest.raises(AttributeError):
            first.steps = ()  # type: ignore[misc]

    def test_fields_in_first_seen_order(self):
        """fields lists each animated name once."""
        timeline = (
            create_timeline()
            .to({"y": 1, "x": 0})
            .to({"z": 1, "x": 2})
            .build()
        )
        assert timeline.fields == ("y", "x", "z")

    def test_step_windows(self):
        """Windows are consecutive [begin, end) ranges."""
        timeline = create_timeline().to({"v": 0}).wait(100).to({"v": 1}, 50).build()
        assert timeline.step_windows() == [(0.0, 0.0), (0.0, 100.0), (100.0, 150.0)]


class TestValidation:
    """Test construction-time errors."""

    @pytest.mark.parametrize("ms", [-1, -0.001, math.inf, math.nan])
    def test_wait_rejects_bad_duration(self, ms):
        with pytest.raises(InvalidDurationError):
            create_timeline().wait(ms)

    def test_transition_rejects_negative_duration(self):
        with pytest.raises(InvalidDurationError) as exc:
            create_timeline().to({"v": 1}, -5)
        assert exc.value.duration == -5

    def test_invalid_duration_is_value_error(self):
        with pytest.raises(ValueError):
            create_timeline().wait(-1)

    def test_empty_values_rejected(self):
        with pytest.raises(ValueError):
            create_timeline().to({}, 10)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_terminal_value_rejected(self, value):
        with pytest.raises(ValueError):
            create_timeline().to({"v": value}, 10)

    def test_unknown_easing_rejected(self):
        with pytest.raises(KeyError):
            create_timeline().to({"v": 1}, 10, "nope")
