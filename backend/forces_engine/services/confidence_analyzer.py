"""Confidence Analyzer.

Dispersion statistics over the raw, unweighted ``confidence_score`` of
every processed item.  These are heuristic indicators, not statistical
intervals.
"""

from __future__ import annotations

import statistics
from typing import Sequence

from ..constants import CONFIDENCE_SCALE_MAX, LOW_CONFIDENCE_ACTIONS, LOW_CONFIDENCE_THRESHOLD
from ..errors import EmptyBatchError
from ..schemas.calculation_schema import ConfidenceMetrics, ConfidenceRange
from ..schemas.item_schema import ItemAnalysis
from .rounding import round_to_hundredths


def consistency_score(confidence_scores: Sequence[float]) -> float:
    """``round((1 - pstdev / 5) * 100) / 100`` — deliberately not clamped."""
    spread = statistics.pstdev(confidence_scores)
    return round_to_hundredths(1 - spread / CONFIDENCE_SCALE_MAX)


def analyze_confidence(items: Sequence[ItemAnalysis]) -> ConfidenceMetrics:
    if not items:
        raise EmptyBatchError("No confidence scores to analyze")

    scores = [item.confidence_score for item in items]
    mean = statistics.fmean(scores)

    return ConfidenceMetrics(
        average_confidence=round_to_hundredths(mean),
        confidence_range=ConfidenceRange(min=min(scores), max=max(scores)),
        consistency_score=consistency_score(scores),
        sample_size=len(scores),
        recommended_actions=list(LOW_CONFIDENCE_ACTIONS) if mean < LOW_CONFIDENCE_THRESHOLD else [],
    )
