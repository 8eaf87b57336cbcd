"""Deterministic Readiness Scorer.

Combines normalized force scores into a single 0-100 readiness score
using a fixed formula.

Rules
-----
- NO I/O
- NO heuristics beyond the explicit formula
- ``demographic`` never participates
- Pure deterministic math; extremes saturate at 0/100
"""

from __future__ import annotations

from ..constants import (
    ANCHORS_WEIGHT,
    ANXIETY_WEIGHT,
    PAIN_WEIGHT,
    PULL_WEIGHT,
    READINESS_BASELINE,
    SCORE_CEILING,
    SCORE_FLOOR,
)
from ..schemas.calculation_schema import ForceResults
from .rounding import clamp, round_half_up


def compute_readiness_score(forces: ForceResults) -> int:
    """Compute the overall readiness score from normalized force results.

    Parameters
    ----------
    forces : ForceResults
        Normalized statistics for all five categories.

    Returns
    -------
    int
        ``clamp(0, 100, round(pain*0.30 + pull*0.40 - anchors*0.20
        - anxiety*0.10 + 50))``.  A batch with only demographic items
        scores exactly 50.
    """
    raw = (
        forces.pain_of_old.normalized_score * PAIN_WEIGHT
        + forces.pull_of_new.normalized_score * PULL_WEIGHT
        - forces.anchors_to_old.normalized_score * ANCHORS_WEIGHT
        - forces.anxiety_of_new.normalized_score * ANXIETY_WEIGHT
        + READINESS_BASELINE
    )
    return int(clamp(round_half_up(raw), SCORE_FLOOR, SCORE_CEILING))
