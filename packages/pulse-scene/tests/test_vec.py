"""Tests for 3D vector helpers."""
from __future__ import annotations

import math

import pytest

from pulse_scene import vec


class TestBasics:
    def test_add_sub(self) -> None:
        assert vec.add((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == (5.0, 7.0, 9.0)
        assert vec.sub((5.0, 3.0, 1.0), (1.0, 2.0, 1.0)) == (4.0, 1.0, 0.0)

    def test_mul_is_componentwise(self) -> None:
        assert vec.mul((1.0, 2.0, 3.0), (2.0, 0.5, 0.0)) == (2.0, 1.0, 0.0)

    def test_cross_of_axes(self) -> None:
        assert vec.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)

    def test_normalize_zero_unchanged(self) -> None:
        assert vec.normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)

    def test_normalize(self) -> None:
        assert vec.magnitude(vec.normalize((3.0, 4.0, 12.0))) == pytest.approx(1.0)


class TestRotateEuler:
    def test_identity(self) -> None:
        assert vec.rotate_euler((1.0, 2.0, 3.0), (0.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)

    def test_about_x(self) -> None:
        assert vec.rotate_euler((0.0, 1.0, 0.0), (math.pi / 2, 0.0, 0.0)) == pytest.approx(
            (0.0, 0.0, 1.0), abs=1e-12
        )

    def test_about_z(self) -> None:
        assert vec.rotate_euler((1.0, 0.0, 0.0), (0.0, 0.0, math.pi / 2)) == pytest.approx(
            (0.0, 1.0, 0.0), abs=1e-12
        )

    def test_order_is_z_then_y_then_x(self) -> None:
        """XYZ Euler order applies Rz first to the vector."""
        v = vec.rotate_euler((1.0, 0.0, 0.0), (math.pi / 2, 0.0, math.pi / 2))
        # Rz: x -> y, then Rx: y -> z
        assert v == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_preserves_length(self) -> None:
        v = (0.3, -0.4, 0.866)
        r = vec.rotate_euler(v, (10.0, 1.3, -0.2))
        assert vec.magnitude(r) == pytest.approx(vec.magnitude(v))
