"""Force Normalization Engine.

Converts accumulated per-category totals into bounded statistics.

Rules
-----
- NO scoring or recommendations
- Shared denominator: every category is divided by the WHOLE batch's
  effective weight, so the five normalized scores do not sum to 100
- Empty categories report zeros and no themes
- A zero total weight is a failure, never a division
"""

from __future__ import annotations

import logging

from ..errors import EmptyBatchError
from ..schemas.calculation_schema import ForceResults, NormalizedForceResult
from ..schemas.enums import ForceCategory
from .accumulator import ForceAccumulator, ForceTotals
from .rounding import clamp

logger = logging.getLogger(__name__)


def _dedupe(themes: list[str]) -> list[str]:
    """Remove duplicates, keeping first-seen order."""
    return list(dict.fromkeys(themes))


def _normalize_slot(slot: ForceAccumulator, total_effective_weight: float) -> NormalizedForceResult:
    if slot.item_count == 0:
        return NormalizedForceResult()

    return NormalizedForceResult(
        average_score=slot.raw_score / slot.item_count,
        average_confidence=slot.raw_confidence / slot.item_count,
        # strength is 1-5, so an unclamped share can reach 500
        normalized_score=clamp(slot.raw_score / total_effective_weight * 100),
        unique_themes=_dedupe(slot.themes),
    )


def normalize_forces(totals: ForceTotals) -> ForceResults:
    """Normalize every category against the batch-wide effective weight.

    Raises
    ------
    EmptyBatchError
        If nothing was accumulated (``total_effective_weight == 0``).
    """
    total = totals.total_effective_weight
    if total <= 0:
        raise EmptyBatchError(
            "Total effective weight is zero — nothing to normalize",
            item_count=totals.item_count,
        )

    results = {
        category.value: _normalize_slot(totals.slot(category), total)
        for category in ForceCategory
    }
    for category, result in results.items():
        logger.debug(
            "[NORMALIZATION] %s: normalized=%.2f avg_score=%.2f themes=%d",
            category,
            result.normalized_score,
            result.average_score,
            len(result.unique_themes),
        )
    return ForceResults(**results)
