import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from .enums import ForceCategory, OutputFormat, WeightingStrategy

logger = logging.getLogger(__name__)


def _default_weighting_strategy() -> WeightingStrategy:
    try:
        return WeightingStrategy(config.DEFAULT_WEIGHTING_STRATEGY)
    except ValueError:
        logger.warning(
            "[CONFIG] Unknown default weighting strategy %r — using 'confidence'",
            config.DEFAULT_WEIGHTING_STRATEGY,
        )
        return WeightingStrategy.CONFIDENCE


def _default_output_format() -> OutputFormat:
    try:
        return OutputFormat(config.DEFAULT_OUTPUT_FORMAT)
    except ValueError:
        logger.warning(
            "[CONFIG] Unknown default output format %r — using 'summary'",
            config.DEFAULT_OUTPUT_FORMAT,
        )
        return OutputFormat.SUMMARY


class CalculationOptions(BaseModel):
    """Switches recognised by the calculation engine."""

    include_confidence_interval: bool = Field(
        default=True,
        description="Populate confidence metrics in the result",
    )
    include_force_interactions: bool = Field(
        default=True,
        description="Run the interaction analyzer",
    )
    weighting_strategy: WeightingStrategy = Field(
        default_factory=_default_weighting_strategy,
        description="equal, confidence, quality or custom",
    )
    output_format: OutputFormat = Field(
        default_factory=_default_output_format,
        description="summary, detailed or raw",
    )


class NormalizedForceResult(BaseModel):
    """Bounded statistics for one force category.

    ``normalized_score`` is this category's share of the WHOLE batch's
    weighted intensity, so the five scores do not sum to 100.
    """

    model_config = ConfigDict(frozen=True)

    average_score: float = Field(
        default=0.0,
        ge=0.0,
        description="Weighted strength total divided by item count",
    )
    average_confidence: float = Field(
        default=0.0,
        ge=0.0,
        description="Weighted confidence total divided by item count",
    )
    normalized_score: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="raw_score / total_effective_weight * 100",
    )
    unique_themes: List[str] = Field(
        default_factory=list,
        description="Themes in first-seen order, duplicates removed",
    )


class ForceResults(BaseModel):
    """Normalized results for all five force categories, always present."""

    model_config = ConfigDict(frozen=True)

    pain_of_old: NormalizedForceResult = Field(default_factory=NormalizedForceResult)
    pull_of_new: NormalizedForceResult = Field(default_factory=NormalizedForceResult)
    anchors_to_old: NormalizedForceResult = Field(default_factory=NormalizedForceResult)
    anxiety_of_new: NormalizedForceResult = Field(default_factory=NormalizedForceResult)
    demographic: NormalizedForceResult = Field(default_factory=NormalizedForceResult)

    def get(self, category: ForceCategory) -> NormalizedForceResult:
        return getattr(self, ForceCategory(category).value)

    def normalized(self, category: ForceCategory) -> float:
        return self.get(category).normalized_score


class ForceInteractions(BaseModel):
    """Composite cross-category metrics."""

    model_config = ConfigDict(frozen=True)

    alignment: int = Field(
        ...,
        description="round((pain + pull) / 2)",
    )
    resistance: int = Field(
        ...,
        description="round((anchors + anxiety) / 2)",
    )
    change_readiness: int = Field(
        ...,
        ge=0,
        description="round(max(0, (pain + pull) - (anchors + anxiety)))",
    )
    critical_factors: List[str] = Field(
        default_factory=list,
        description="Advisory labels for scored categories above the critical threshold",
    )


class ConfidenceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class ConfidenceMetrics(BaseModel):
    """Dispersion statistics over the raw, unweighted confidence scores.

    Heuristic indicators only; ``consistency_score`` is not clamped and
    can fall below zero for widely spread inputs.
    """

    model_config = ConfigDict(frozen=True)

    average_confidence: float = Field(
        ...,
        description="Mean confidence, rounded to 2 decimals",
    )
    confidence_range: ConfidenceRange
    consistency_score: float = Field(
        ...,
        description="round((1 - population_stddev / 5) * 100) / 100",
    )
    sample_size: int = Field(
        ...,
        ge=0,
        description="Number of items analyzed",
    )
    recommended_actions: List[str] = Field(
        default_factory=list,
        description="Follow-ups suggested when average confidence is low",
    )


class CalculationResult(BaseModel):
    """Final, immutable output of one engine invocation."""

    model_config = ConfigDict(frozen=True)

    overall_readiness_score: int = Field(
        ...,
        ge=0,
        le=100,
        description="clamp(0, 100, round(pain*0.3 + pull*0.4 - anchors*0.2 - anxiety*0.1 + 50))",
    )
    force_results: ForceResults
    interactions: Optional[ForceInteractions] = Field(
        default=None,
        description="Absent unless include_force_interactions is set",
    )
    confidence_metrics: Optional[ConfidenceMetrics] = Field(
        default=None,
        description="Absent unless include_confidence_interval is set",
    )
    recommendations: List[str] = Field(
        default_factory=list,
        description="Tier recommendations followed by triggered gap recommendations",
    )


class ProcessingMetadata(BaseModel):
    """Bookkeeping about how a result was produced."""

    model_config = ConfigDict(frozen=True)

    total_processed: int = Field(..., ge=0)
    errors: List[str] = Field(default_factory=list)
    processing_time_ms: float = Field(default=0.0, ge=0.0)


class CalculationRun(BaseModel):
    """A result together with the metadata of the run that produced it."""

    model_config = ConfigDict(frozen=True)

    result: CalculationResult
    metadata: ProcessingMetadata
