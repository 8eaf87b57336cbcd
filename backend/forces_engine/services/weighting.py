"""Weighting Strategy Resolver.

Turns an item's declared weight into the effective weight used during
aggregation.

Strategies
----------
- equal       effective = declared
- confidence  effective = declared * confidence / 5
- quality     effective = declared * multiplier(quality_label)
- custom      effective = injected_function(item); aliases ``equal``
              when no function is injected
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from ..constants import CONFIDENCE_SCALE_MAX, DEFAULT_QUALITY_MULTIPLIER, QUALITY_MULTIPLIERS
from ..errors import CustomWeightingError
from ..schemas.enums import WeightingStrategy
from ..schemas.item_schema import ItemAnalysis

logger = logging.getLogger(__name__)

CustomWeighting = Callable[[ItemAnalysis], float]


def quality_multiplier(quality_label: str) -> float:
    """Map a quality label to its weight multiplier; unknown labels weigh 1.0."""
    key = str(getattr(quality_label, "value", quality_label)).strip().lower()
    return QUALITY_MULTIPLIERS.get(key, DEFAULT_QUALITY_MULTIPLIER)


def resolve_effective_weight(
    declared_weight: float,
    strategy: WeightingStrategy,
    confidence_score: float,
    quality_label: str,
) -> float:
    """Compute the effective weight for one item.  Pure, never fails.

    ``custom`` resolves like ``equal`` here; injected custom functions are
    applied by :func:`weigh_item`.
    """
    strategy = WeightingStrategy(strategy)

    if strategy is WeightingStrategy.CONFIDENCE:
        return declared_weight * (confidence_score / CONFIDENCE_SCALE_MAX)
    if strategy is WeightingStrategy.QUALITY:
        return declared_weight * quality_multiplier(quality_label)
    # EQUAL and CUSTOM without an injected function
    return declared_weight


def weigh_item(
    item: ItemAnalysis,
    strategy: WeightingStrategy,
    custom_weighting: Optional[CustomWeighting] = None,
) -> float:
    """Effective weight for *item*, honouring an injected custom function."""
    if WeightingStrategy(strategy) is WeightingStrategy.CUSTOM and custom_weighting is not None:
        weight = custom_weighting(item)
        if (
            isinstance(weight, bool)
            or not isinstance(weight, (int, float))
            or not math.isfinite(weight)
            or weight <= 0
        ):
            raise CustomWeightingError(item.item_id, weight)
        return float(weight)

    return resolve_effective_weight(
        item.declared_weight,
        strategy,
        item.confidence_score,
        item.quality_label,
    )
