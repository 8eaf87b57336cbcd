"""Output Projector — shapes a ``CalculationResult`` into one external payload.

Formats
-------
- raw       full result + processing metadata, unmodified
- detailed  summary block, per-force breakdown, interactions, confidence,
            recommendations, metadata
- summary   score, level, top-3 forces, top-4 recommendations,
            average confidence, sample size
"""

from __future__ import annotations

from typing import List

from ..constants import (
    DETAILED_INSIGHT_COUNT,
    READINESS_LEVEL_FLOOR,
    READINESS_LEVELS,
    SUMMARY_RECOMMENDATION_COUNT,
    SUMMARY_TOP_FORCE_COUNT,
)
from ..schemas.calculation_schema import CalculationResult, ForceResults, ProcessingMetadata
from ..schemas.enums import ForceCategory, OutputFormat
from ..schemas.output_schema import (
    CalculationPayload,
    DetailedPayload,
    DetailedSummary,
    RawPayload,
    SummaryPayload,
    TopForce,
)


def readiness_level(score: int) -> str:
    """Qualitative label for a readiness score."""
    for threshold, label in READINESS_LEVELS:
        if score >= threshold:
            return label
    return READINESS_LEVEL_FLOOR


def top_forces(forces: ForceResults, limit: int = SUMMARY_TOP_FORCE_COUNT) -> List[TopForce]:
    """Categories by normalized score, descending; ties keep category order."""
    ranked = sorted(ForceCategory, key=forces.normalized, reverse=True)
    return [TopForce(force=category, score=forces.normalized(category)) for category in ranked[:limit]]


def _project_raw(result: CalculationResult, metadata: ProcessingMetadata) -> RawPayload:
    return RawPayload(**dict(result), processing_metadata=metadata)


def _project_detailed(result: CalculationResult, metadata: ProcessingMetadata) -> DetailedPayload:
    return DetailedPayload(
        summary=DetailedSummary(
            overall_readiness_score=result.overall_readiness_score,
            readiness_level=readiness_level(result.overall_readiness_score),
            key_insights=result.recommendations[:DETAILED_INSIGHT_COUNT],
        ),
        force_analysis=result.force_results,
        interactions=result.interactions,
        confidence=result.confidence_metrics,
        recommendations=list(result.recommendations),
        metadata=metadata,
    )


def _project_summary(result: CalculationResult, metadata: ProcessingMetadata) -> SummaryPayload:
    confidence = result.confidence_metrics
    return SummaryPayload(
        overall_readiness_score=result.overall_readiness_score,
        readiness_level=readiness_level(result.overall_readiness_score),
        top_forces=top_forces(result.force_results),
        key_recommendations=result.recommendations[:SUMMARY_RECOMMENDATION_COUNT],
        confidence_level=confidence.average_confidence if confidence is not None else None,
        sample_size=metadata.total_processed,
    )


def project(
    result: CalculationResult,
    output_format: OutputFormat,
    metadata: ProcessingMetadata,
) -> CalculationPayload:
    """Shape *result* for the requested *output_format*."""
    output_format = OutputFormat(output_format)

    if output_format is OutputFormat.RAW:
        return _project_raw(result, metadata)
    if output_format is OutputFormat.DETAILED:
        return _project_detailed(result, metadata)
    return _project_summary(result, metadata)
