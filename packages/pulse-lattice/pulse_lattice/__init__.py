"""pulse-lattice - Golden-angle point distribution over the unit sphere."""
from __future__ import annotations

from pulse_lattice.fibonacci import GOLDEN_ANGLE, adjacent_pairs, distribute, spiral_phase
from pulse_lattice.types import InvalidCountError, SpherePoint

__all__ = [
    "SpherePoint",
    "InvalidCountError",
    "GOLDEN_ANGLE",
    "distribute",
    "spiral_phase",
    "adjacent_pairs",
]
