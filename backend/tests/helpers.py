"""Shared builders for forces engine tests."""

from forces_engine.schemas.calculation_schema import ForceResults, NormalizedForceResult
from forces_engine.schemas.enums import ForceCategory
from forces_engine.schemas.item_schema import ItemAnalysis

_item_counter = 0


def make_item(
    category,
    *,
    strength=4.0,
    confidence=4.0,
    weight=1.0,
    quality="good",
    themes=None,
    expected=None,
):
    """Build an ``ItemAnalysis`` assigned to *category*."""
    global _item_counter
    _item_counter += 1
    category = ForceCategory(category)
    return ItemAnalysis(
        item_id=f"item-{_item_counter}",
        expected_category=ForceCategory(expected) if expected else category,
        declared_weight=weight,
        assigned_category=category,
        strength_score=strength,
        confidence_score=confidence,
        quality_label=quality,
        themes=list(themes or []),
    )


def one_per_category(**kwargs):
    """Five items, one assigned to each force category."""
    return [make_item(category, **kwargs) for category in ForceCategory]


def forces_with(pain=0.0, pull=0.0, anchors=0.0, anxiety=0.0, demographic=0.0):
    """``ForceResults`` with only normalized scores set."""
    return ForceResults(
        pain_of_old=NormalizedForceResult(normalized_score=pain),
        pull_of_new=NormalizedForceResult(normalized_score=pull),
        anchors_to_old=NormalizedForceResult(normalized_score=anchors),
        anxiety_of_new=NormalizedForceResult(normalized_score=anxiety),
        demographic=NormalizedForceResult(normalized_score=demographic),
    )
