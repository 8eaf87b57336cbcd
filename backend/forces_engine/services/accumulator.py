"""Force Accumulator.

Folds weighted items into per-category running totals plus one
batch-wide effective-weight total.  Each call to
:func:`accumulate_forces` builds a fresh :class:`ForceTotals`; nothing is
shared between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..schemas.enums import ForceCategory
from ..schemas.item_schema import ItemAnalysis


@dataclass
class ForceAccumulator:
    """Running totals for one force category."""

    raw_score: float = 0.0
    raw_confidence: float = 0.0
    item_count: int = 0
    themes: List[str] = field(default_factory=list)  # duplicates retained

    def add(self, item: ItemAnalysis, effective_weight: float) -> None:
        self.raw_score += item.strength_score * effective_weight
        self.raw_confidence += item.confidence_score * effective_weight
        self.item_count += 1
        self.themes.extend(item.themes)


@dataclass
class ForceTotals:
    """Accumulators for all five categories and the shared weight total."""

    pain_of_old: ForceAccumulator = field(default_factory=ForceAccumulator)
    pull_of_new: ForceAccumulator = field(default_factory=ForceAccumulator)
    anchors_to_old: ForceAccumulator = field(default_factory=ForceAccumulator)
    anxiety_of_new: ForceAccumulator = field(default_factory=ForceAccumulator)
    demographic: ForceAccumulator = field(default_factory=ForceAccumulator)
    total_effective_weight: float = 0.0

    def slot(self, category: ForceCategory) -> ForceAccumulator:
        return getattr(self, ForceCategory(category).value)

    def accumulate(self, item: ItemAnalysis, effective_weight: float) -> None:
        # assigned_category, never expected_category
        self.slot(item.assigned_category).add(item, effective_weight)
        self.total_effective_weight += effective_weight

    @property
    def item_count(self) -> int:
        return sum(self.slot(category).item_count for category in ForceCategory)


def accumulate_forces(weighted_items: Iterable[Tuple[ItemAnalysis, float]]) -> ForceTotals:
    """Fold ``(item, effective_weight)`` pairs into a new :class:`ForceTotals`."""
    totals = ForceTotals()
    for item, effective_weight in weighted_items:
        totals.accumulate(item, effective_weight)
    return totals
