"""Forces Calculation Engine.

Single synchronous entry point that turns a batch of classified items
into a ``CalculationResult``.

Pipeline order:
1. Resolve effective weights (weighting strategy + quality mapper)
2. Accumulate per-category totals
3. Normalize against the batch-wide effective weight
4. Score overall readiness
5. Analyze interactions (optional)
6. Analyze confidence (optional)
7. Generate recommendations

Every invocation owns its accumulators; there is no shared state, so
concurrent callers need no locking.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..errors import EmptyBatchError
from ..schemas.calculation_schema import (
    CalculationOptions,
    CalculationResult,
    CalculationRun,
    ProcessingMetadata,
)
from ..schemas.enums import WeightingStrategy
from ..schemas.item_schema import ItemAnalysis
from ..timing import StepTimer
from .accumulator import accumulate_forces
from .confidence_analyzer import analyze_confidence
from .interaction_analyzer import analyze_interactions
from .normalization_engine import normalize_forces
from .recommendation_rules import generate_recommendations
from .scoring_engine import compute_readiness_score
from .weighting import CustomWeighting, weigh_item

logger = logging.getLogger(__name__)


def calculate(
    items: Sequence[ItemAnalysis],
    options: Optional[CalculationOptions] = None,
    custom_weighting: Optional[CustomWeighting] = None,
) -> CalculationRun:
    """Run the full pipeline and return the result with processing metadata.

    Parameters
    ----------
    items : Sequence[ItemAnalysis]
        Classified items; aggregation uses ``assigned_category``.
    options : CalculationOptions, optional
        Defaults to ``CalculationOptions()``.
    custom_weighting : callable, optional
        ``item -> effective_weight`` used when the strategy is ``custom``.

    Raises
    ------
    EmptyBatchError
        No items, or a zero total effective weight.
    CustomWeightingError
        The injected weighting function returned an unusable weight.
    """
    options = options or CalculationOptions()
    items = list(items)

    if not items:
        raise EmptyBatchError("No items available for force calculation", item_count=0)

    strategy = options.weighting_strategy
    if strategy is WeightingStrategy.CUSTOM and custom_weighting is None:
        logger.warning("[WEIGHTING] 'custom' strategy without a weighting function — using declared weights")

    timer = StepTimer("engine")
    logger.info("[ENGINE] Calculating forces for %d items (strategy=%s)", len(items), strategy.value)

    with timer.step("weighting"):
        weighted = [(item, weigh_item(item, strategy, custom_weighting)) for item in items]

    with timer.step("accumulate"):
        totals = accumulate_forces(weighted)

    with timer.step("normalize"):
        forces = normalize_forces(totals)

    with timer.step("score"):
        readiness = compute_readiness_score(forces)

    interactions = None
    if options.include_force_interactions:
        with timer.step("interactions"):
            interactions = analyze_interactions(forces)

    confidence_metrics = None
    if options.include_confidence_interval:
        with timer.step("confidence"):
            confidence_metrics = analyze_confidence(items)

    with timer.step("recommendations"):
        recommendations = generate_recommendations(forces, readiness)

    result = CalculationResult(
        overall_readiness_score=readiness,
        force_results=forces,
        interactions=interactions,
        confidence_metrics=confidence_metrics,
        recommendations=recommendations,
    )
    metadata = ProcessingMetadata(
        total_processed=len(items),
        errors=[],
        processing_time_ms=round(timer.summary(), 2),
    )

    logger.info("[SCORING] Overall readiness %d from %d items", readiness, len(items))
    return CalculationRun(result=result, metadata=metadata)


def compute(
    items: Sequence[ItemAnalysis],
    options: Optional[CalculationOptions] = None,
    custom_weighting: Optional[CustomWeighting] = None,
) -> CalculationResult:
    """Compute the ``CalculationResult`` for *items*.  See :func:`calculate`."""
    return calculate(items, options, custom_weighting).result
