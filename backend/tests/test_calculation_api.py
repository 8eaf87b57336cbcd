"""Calculation API tests — request validation, output formats, error mapping."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from forces_engine import config
from forces_engine.main import app

client = TestClient(app)

CATEGORIES = ["pain_of_old", "pull_of_new", "anchors_to_old", "anxiety_of_new", "demographic"]


def _item(category, index=0, **overrides):
    data = {
        "item_id": f"{category}-{index}",
        "expected_category": category,
        "declared_weight": 1.0,
        "assigned_category": category,
        "strength_score": 4,
        "confidence_score": 4,
        "quality_label": "good",
        "themes": [f"{category} theme"],
    }
    data.update(overrides)
    return data


def _five_items():
    return [_item(category, i) for i, category in enumerate(CATEGORIES)]


def _post(items, **options):
    return client.post("/jtbd/calculate", json={"items": items, "options": options})


# ===================================================================== #
#  General endpoints                                                      #
# ===================================================================== #

class TestGeneral:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_root_lists_calculate(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "calculate" in resp.json()["endpoints"]


# ===================================================================== #
#  Calculation                                                            #
# ===================================================================== #

class TestCalculate:
    def test_summary_format(self):
        resp = _post(_five_items(), weighting_strategy="equal", output_format="summary")
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        calc = data["calculation"]
        assert calc["overall_readiness_score"] == 82
        assert calc["readiness_level"] == "Ready to Scale"
        assert len(calc["top_forces"]) == 3
        assert len(calc["key_recommendations"]) == 4
        assert calc["sample_size"] == 5

    def test_detailed_format(self):
        resp = _post(_five_items(), weighting_strategy="equal", output_format="detailed")
        assert resp.status_code == 200
        calc = resp.json()["calculation"]
        assert calc["summary"]["overall_readiness_score"] == 82
        assert set(calc["force_analysis"]) == set(CATEGORIES)
        assert calc["force_analysis"]["pain_of_old"]["normalized_score"] == pytest.approx(80.0)
        assert calc["interactions"]["critical_factors"][0] == "High current pain"
        assert calc["confidence"]["sample_size"] == 5
        assert calc["metadata"]["total_processed"] == 5

    def test_raw_format_without_interactions(self):
        resp = _post(
            _five_items(),
            weighting_strategy="equal",
            output_format="raw",
            include_force_interactions=False,
        )
        assert resp.status_code == 200
        calc = resp.json()["calculation"]
        assert "interactions" not in calc
        assert calc["processing_metadata"]["total_processed"] == 5
        assert calc["force_results"]["demographic"]["unique_themes"] == ["demographic theme"]

    def test_metadata_envelope(self):
        resp = _post(_five_items(), weighting_strategy="quality")
        meta = resp.json()["metadata"]
        assert meta["request_id"]
        assert meta["timestamp"]
        assert meta["processing_stats"]["total_requested"] == 5
        assert meta["processing_stats"]["successfully_analyzed"] == 5
        assert meta["processing_stats"]["errors"] == 0
        assert meta["options"]["weighting_strategy"] == "quality"

    def test_custom_strategy_accepted(self):
        resp = _post(_five_items(), weighting_strategy="custom", output_format="raw")
        assert resp.status_code == 200
        assert resp.json()["calculation"]["overall_readiness_score"] == 82


# ===================================================================== #
#  Validation and errors                                                  #
# ===================================================================== #

class TestValidation:
    def test_empty_batch_rejected(self):
        assert _post([]).status_code == 422

    def test_strength_out_of_range(self):
        assert _post([_item("pain_of_old", strength_score=6)]).status_code == 422

    def test_confidence_out_of_range(self):
        assert _post([_item("pain_of_old", confidence_score=0.5)]).status_code == 422

    def test_weight_out_of_request_bounds(self):
        assert _post([_item("pain_of_old", declared_weight=5.5)]).status_code == 422
        assert _post([_item("pain_of_old", declared_weight=0.05)]).status_code == 422

    def test_unknown_category(self):
        assert _post([_item("pain_of_old", assigned_category="gravity")]).status_code == 422

    def test_unknown_strategy(self):
        assert _post(_five_items(), weighting_strategy="random").status_code == 422

    def test_batch_size_limit(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_BATCH_SIZE", 2)
        resp = _post(_five_items())
        assert resp.status_code == 422
        assert "At most 2 items" in resp.json()["detail"]
