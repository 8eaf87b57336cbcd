"""Force Interaction Analyzer — composite metrics across the scored forces."""

from __future__ import annotations

from typing import List

from ..constants import CRITICAL_FACTOR_LABELS, CRITICAL_FACTOR_THRESHOLD
from ..schemas.calculation_schema import ForceInteractions, ForceResults
from ..schemas.enums import SCORED_CATEGORIES
from .rounding import round_half_up


def identify_critical_factors(forces: ForceResults) -> List[str]:
    """Labels for scored categories above the critical threshold, pain → pull → anchors → anxiety."""
    return [
        CRITICAL_FACTOR_LABELS[category.value]
        for category in SCORED_CATEGORIES
        if forces.normalized(category) > CRITICAL_FACTOR_THRESHOLD
    ]


def analyze_interactions(forces: ForceResults) -> ForceInteractions:
    pain = forces.pain_of_old.normalized_score
    pull = forces.pull_of_new.normalized_score
    anchors = forces.anchors_to_old.normalized_score
    anxiety = forces.anxiety_of_new.normalized_score

    drivers = pain + pull
    barriers = anchors + anxiety

    return ForceInteractions(
        alignment=round_half_up(drivers / 2),
        resistance=round_half_up(barriers / 2),
        change_readiness=round_half_up(max(0.0, drivers - barriers)),
        critical_factors=identify_critical_factors(forces),
    )
