"""Rounding and clamping helpers shared by the scoring services."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity (82.5 → 83, -0.5 → 0).

    Python's built-in ``round`` uses banker's rounding, which would turn
    82.5 into 82; every score in the engine uses this instead.
    """
    return int(math.floor(value + 0.5))


def round_to_hundredths(value: float) -> float:
    """Round to 2 decimals with ties toward +infinity."""
    return round_half_up(value * 100) / 100


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))
