"""Recommendation rules — deterministic, no LLM, no randomness.

One tier rule on the overall readiness score, then four independent gap
rules evaluated in fixed category order.  Identical input always yields
an identical list.
"""

from __future__ import annotations

from typing import List

from ..constants import (
    ANCHORS_GAP_RECOMMENDATION,
    ANXIETY_GAP_RECOMMENDATION,
    HIGH_READINESS_RECOMMENDATIONS,
    HIGH_READINESS_THRESHOLD,
    LOW_READINESS_RECOMMENDATIONS,
    MODERATE_READINESS_RECOMMENDATIONS,
    MODERATE_READINESS_THRESHOLD,
    PAIN_GAP_RECOMMENDATION,
    PULL_GAP_RECOMMENDATION,
    STRONG_BARRIER_THRESHOLD,
    WEAK_DRIVER_THRESHOLD,
)
from ..schemas.calculation_schema import ForceResults


# ── Tier rule ─────────────────────────────────────────────────────────

def tier_recommendations(readiness_score: int) -> List[str]:
    """Two strings chosen by readiness tier."""
    if readiness_score >= HIGH_READINESS_THRESHOLD:
        return list(HIGH_READINESS_RECOMMENDATIONS)
    if readiness_score >= MODERATE_READINESS_THRESHOLD:
        return list(MODERATE_READINESS_RECOMMENDATIONS)
    return list(LOW_READINESS_RECOMMENDATIONS)


# ── Gap rules ─────────────────────────────────────────────────────────

def gap_recommendations(forces: ForceResults) -> List[str]:
    """Triggered gap strings in order pain → pull → anchors → anxiety."""
    gaps: List[str] = []

    if forces.pain_of_old.normalized_score < WEAK_DRIVER_THRESHOLD:
        gaps.append(PAIN_GAP_RECOMMENDATION)

    if forces.pull_of_new.normalized_score < WEAK_DRIVER_THRESHOLD:
        gaps.append(PULL_GAP_RECOMMENDATION)

    if forces.anchors_to_old.normalized_score > STRONG_BARRIER_THRESHOLD:
        gaps.append(ANCHORS_GAP_RECOMMENDATION)

    if forces.anxiety_of_new.normalized_score > STRONG_BARRIER_THRESHOLD:
        gaps.append(ANXIETY_GAP_RECOMMENDATION)

    return gaps


def generate_recommendations(forces: ForceResults, readiness_score: int) -> List[str]:
    return tier_recommendations(readiness_score) + gap_recommendations(forces)
