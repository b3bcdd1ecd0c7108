"""Tests for the orbit camera and its projection."""
from __future__ import annotations

import math

import pytest

from pulse_scene import OrbitCamera


class TestLookingFrom:
    def test_reference_camera(self) -> None:
        camera = OrbitCamera.looking_from((0.0, 0.0, -4.0))
        assert camera.distance == 4.0
        assert camera.yaw == 0.0
        assert camera.pitch == 0.0
        assert camera.eye() == pytest.approx((0.0, 0.0, -4.0))

    def test_round_trip_eye(self) -> None:
        camera = OrbitCamera.looking_from((1.0, 2.0, 3.0))
        assert camera.eye() == pytest.approx((1.0, 2.0, 3.0))

    def test_overhead_pitch_is_clamped(self) -> None:
        """A camera straight above the target still projects the origin."""
        camera = OrbitCamera.looking_from((0.0, 4.0, 0.0))
        assert camera.pitch < math.pi / 2
        sx, sy, depth = camera.project((0.0, 0.0, 0.0), 800, 600)
        assert (sx, sy) == pytest.approx((400.0, 300.0))
        assert depth == pytest.approx(4.0)

    def test_rejects_position_at_target(self) -> None:
        with pytest.raises(ValueError):
            OrbitCamera.looking_from((0.0, 0.0, 0.0))


class TestProject:
    def test_origin_is_screen_center(self) -> None:
        sx, sy, depth = OrbitCamera().project((0.0, 0.0, 0.0), 800, 600)
        assert (sx, sy) == pytest.approx((400.0, 300.0))
        assert depth == pytest.approx(4.0)

    def test_up_is_up(self) -> None:
        _, sy, _ = OrbitCamera().project((0.0, 1.0, 0.0), 800, 600)
        assert sy < 300.0

    def test_positive_x_appears_left(self) -> None:
        """Looking down +z from behind the origin mirrors x on screen."""
        sx, _, _ = OrbitCamera().project((1.0, 0.0, 0.0), 800, 600)
        assert sx < 400.0

    def test_focal_length(self) -> None:
        """A point one unit up at depth 4 with a 45 degree fov."""
        _, sy, _ = OrbitCamera().project((0.0, 1.0, 0.0), 800, 600)
        focal = 300.0 / math.tan(math.radians(22.5))
        assert sy == pytest.approx(300.0 - focal / 4.0)

    def test_behind_near_plane_is_culled(self) -> None:
        assert OrbitCamera().project((0.0, 0.0, -3.5), 800, 600) is None

    def test_pixel_scale(self) -> None:
        camera = OrbitCamera()
        assert camera.pixel_scale(4.0, 600) == pytest.approx(300.0 / math.tan(math.radians(22.5)) / 4.0)


class TestOrbit:
    def test_half_turn_moves_eye_behind(self) -> None:
        camera = OrbitCamera()
        camera.orbit(math.pi, 0.0)
        assert camera.eye() == pytest.approx((0.0, 0.0, 4.0), abs=1e-9)

    def test_pitch_is_clamped(self) -> None:
        camera = OrbitCamera()
        camera.orbit(0.0, 10.0)
        assert camera.pitch < math.pi / 2
        camera.orbit(0.0, -20.0)
        assert camera.pitch > -math.pi / 2

    def test_zoom_is_clamped(self) -> None:
        camera = OrbitCamera()
        camera.zoom(0.01)
        assert camera.distance == 1.5
        camera.zoom(1000.0)
        assert camera.distance == 50.0

    def test_zoom_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            OrbitCamera().zoom(0.0)
