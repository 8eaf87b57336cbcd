from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .calculation_schema import (
    CalculationResult,
    ConfidenceMetrics,
    ForceInteractions,
    ForceResults,
    ProcessingMetadata,
)
from .enums import ForceCategory


class TopForce(BaseModel):
    model_config = ConfigDict(frozen=True)

    force: ForceCategory
    score: float


class SummaryPayload(BaseModel):
    """Compact payload: score, level, strongest forces, headline recommendations."""

    model_config = ConfigDict(frozen=True)

    overall_readiness_score: int = Field(..., ge=0, le=100)
    readiness_level: str
    top_forces: List[TopForce] = Field(
        default_factory=list,
        description="Top three categories by normalized score, descending",
    )
    key_recommendations: List[str] = Field(
        default_factory=list,
        description="First four recommendations",
    )
    confidence_level: Optional[float] = Field(
        default=None,
        description="Average confidence; absent when confidence metrics are disabled",
    )
    sample_size: int = Field(..., ge=0)


class DetailedSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_readiness_score: int = Field(..., ge=0, le=100)
    readiness_level: str
    key_insights: List[str] = Field(
        default_factory=list,
        description="First three recommendations",
    )


class DetailedPayload(BaseModel):
    """Full breakdown for dashboards and reports."""

    model_config = ConfigDict(frozen=True)

    summary: DetailedSummary
    force_analysis: ForceResults
    interactions: Optional[ForceInteractions] = None
    confidence: Optional[ConfidenceMetrics] = None
    recommendations: List[str] = Field(default_factory=list)
    metadata: ProcessingMetadata


class RawPayload(CalculationResult):
    """The internal result, unmodified, plus processing metadata."""

    processing_metadata: ProcessingMetadata


CalculationPayload = Union[SummaryPayload, DetailedPayload, RawPayload]
