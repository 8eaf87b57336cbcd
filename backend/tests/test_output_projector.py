"""Output projector tests — readiness levels and the three payload shapes."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from forces_engine.schemas.calculation_schema import CalculationOptions
from forces_engine.schemas.enums import ForceCategory, OutputFormat, WeightingStrategy
from forces_engine.schemas.output_schema import DetailedPayload, RawPayload, SummaryPayload
from forces_engine.services.calculation_engine import calculate
from forces_engine.services.output_projector import project, readiness_level, top_forces
from helpers import forces_with, make_item, one_per_category


def _run(items=None, **option_overrides):
    options = CalculationOptions(weighting_strategy=WeightingStrategy.EQUAL, **option_overrides)
    return calculate(items or one_per_category(), options)


class TestReadinessLevel:
    @pytest.mark.parametrize("score,label", [
        (100, "Ready to Scale"),
        (80, "Ready to Scale"),
        (79, "Ready to Implement"),
        (70, "Ready to Implement"),
        (69, "Ready with Preparation"),
        (60, "Ready with Preparation"),
        (59, "Needs Significant Preparation"),
        (40, "Needs Significant Preparation"),
        (39, "Not Ready - Build Foundation First"),
        (0, "Not Ready - Build Foundation First"),
    ])
    def test_bands(self, score, label):
        assert readiness_level(score) == label


class TestTopForces:
    def test_descending_top_three(self):
        forces = forces_with(pain=10, pull=70, anchors=40, anxiety=55, demographic=5)
        ranked = top_forces(forces)
        assert [entry.force for entry in ranked] == [
            ForceCategory.PULL_OF_NEW,
            ForceCategory.ANXIETY_OF_NEW,
            ForceCategory.ANCHORS_TO_OLD,
        ]
        assert ranked[0].score == 70

    def test_ties_keep_category_order(self):
        ranked = top_forces(forces_with())
        assert [entry.force for entry in ranked] == [
            ForceCategory.PAIN_OF_OLD,
            ForceCategory.PULL_OF_NEW,
            ForceCategory.ANCHORS_TO_OLD,
        ]


class TestProject:
    def test_summary(self):
        run = _run()
        payload = project(run.result, OutputFormat.SUMMARY, run.metadata)
        assert isinstance(payload, SummaryPayload)
        assert payload.overall_readiness_score == 82
        assert payload.readiness_level == "Ready to Scale"
        assert len(payload.top_forces) == 3
        assert payload.key_recommendations == run.result.recommendations[:4]
        assert payload.confidence_level == 4.0
        assert payload.sample_size == 5

    def test_summary_without_confidence_metrics(self):
        run = _run(include_confidence_interval=False)
        payload = project(run.result, OutputFormat.SUMMARY, run.metadata)
        assert payload.confidence_level is None
        assert "confidence_level" not in payload.model_dump(exclude_none=True)

    def test_detailed(self):
        run = _run()
        payload = project(run.result, "detailed", run.metadata)
        assert isinstance(payload, DetailedPayload)
        assert payload.summary.key_insights == run.result.recommendations[:3]
        assert payload.force_analysis == run.result.force_results
        assert payload.interactions == run.result.interactions
        assert payload.confidence == run.result.confidence_metrics
        assert payload.recommendations == run.result.recommendations
        assert payload.metadata == run.metadata

    def test_detailed_without_interactions_has_no_section(self):
        run = _run(include_force_interactions=False)
        dumped = project(run.result, OutputFormat.DETAILED, run.metadata).model_dump(exclude_none=True)
        assert "interactions" not in dumped
        assert "confidence" in dumped

    def test_raw_is_result_plus_metadata(self):
        run = _run([make_item(ForceCategory.PAIN_OF_OLD, themes=["t"])])
        payload = project(run.result, OutputFormat.RAW, run.metadata)
        assert isinstance(payload, RawPayload)
        dumped = payload.model_dump()
        assert dumped.pop("processing_metadata") == run.metadata.model_dump()
        assert dumped == run.result.model_dump()

    def test_raw_without_interactions_has_no_section(self):
        run = _run(include_force_interactions=False)
        dumped = project(run.result, OutputFormat.RAW, run.metadata).model_dump(exclude_none=True)
        assert "interactions" not in dumped
