"""Fibonacci (golden-angle) lattice on the unit sphere.

Points are laid out on a spiral running from the south pole (y = -1) to the
north pole. Each row is an equal-height band, and successive rows are rotated
by the golden angle, which avoids the banding of a latitude/longitude grid.

The lattice starts at row 1, so ``distribute(n)`` returns ``n - 1`` points.
Row ``i`` is phase-shifted by one row: ``phi = ((i + 1) % n) * GOLDEN_ANGLE``.
"""
from __future__ import annotations

import logging
import math

from pulse_lattice.types import InvalidCountError, SpherePoint

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))

# Phase shift applied to every row. ``randomize`` does not change it.
_PHASE_SHIFT = 1


def spiral_phase(row: int, count: int) -> float:
    """Azimuth of lattice row ``row`` for a lattice of ``count`` rows."""
    return ((row + _PHASE_SHIFT) % count) * GOLDEN_ANGLE


def distribute(count: int, randomize: bool = False) -> list[SpherePoint]:
    """Place points evenly over the unit sphere.

    Args:
        count: Number of lattice rows. Row 0 is skipped, so the result
            holds ``count - 1`` points.
        randomize: Accepted for compatibility; the spiral phase is fixed
            either way and the output is always deterministic.

    Raises:
        InvalidCountError: If ``count`` is not a positive integer.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidCountError(count)
    if randomize:
        logger.debug("randomize requested for %d points; phase stays fixed", count)

    offset = 2 / count
    points: list[SpherePoint] = []
    for row in range(1, count):
        y = row * offset - 1 + offset / 2
        r = math.sqrt(1 - y * y)
        phi = spiral_phase(row, count)
        points.append(
            SpherePoint(
                index=row - 1,
                x=math.cos(phi) * r,
                y=y,
                z=math.sin(phi) * r,
            )
        )
    return points


def adjacent_pairs(points: list[SpherePoint]) -> list[tuple[SpherePoint, SpherePoint]]:
    """Pair each point with its spiral successor, wrapping the last to the first."""
    n = len(points)
    if n < 2:
        return []
    return [(points[i], points[(i + 1) % n]) for i in range(n)]
