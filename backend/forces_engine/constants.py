"""Centralized constants shared across the forces engine.

This module is the SINGLE SOURCE OF TRUTH for readiness weights,
weighting multipliers, rule thresholds and every fixed advisory string.
Reused by:
  - Weighting resolver
  - Readiness scorer and interaction analyzer
  - Recommendation rules and output projector
"""

from __future__ import annotations

# ── Readiness formula ───────────────────────────────────────────────────
# overall = pain*0.30 + pull*0.40 - anchors*0.20 - anxiety*0.10 + 50
# ``demographic`` never participates.

PAIN_WEIGHT: float = 0.30
PULL_WEIGHT: float = 0.40
ANCHORS_WEIGHT: float = 0.20
ANXIETY_WEIGHT: float = 0.10
READINESS_BASELINE: float = 50.0

SCORE_FLOOR: float = 0.0
SCORE_CEILING: float = 100.0

# ── Quality weighting ───────────────────────────────────────────────────
# Multiplier applied to the declared weight under the ``quality`` strategy.

QUALITY_MULTIPLIERS: dict[str, float] = {
    "excellent": 1.2,
    "good": 1.0,
    "fair": 0.8,
    "poor": 0.6,
}
DEFAULT_QUALITY_MULTIPLIER: float = 1.0

# Confidence strategy divides the 1-5 confidence score by this.
CONFIDENCE_SCALE_MAX: float = 5.0

# ── Interaction analysis ────────────────────────────────────────────────

CRITICAL_FACTOR_THRESHOLD: float = 60.0

CRITICAL_FACTOR_LABELS: dict[str, str] = {
    "pain_of_old": "High current pain",
    "pull_of_new": "Strong attraction to new approach",
    "anchors_to_old": "Significant barriers",
    "anxiety_of_new": "High change anxiety",
}

# ── Confidence analysis ─────────────────────────────────────────────────

LOW_CONFIDENCE_THRESHOLD: float = 3.5
LOW_CONFIDENCE_ACTIONS: list[str] = ["Collect more data", "Refine questions"]

# ── Recommendation rules ────────────────────────────────────────────────

HIGH_READINESS_THRESHOLD: int = 75
MODERATE_READINESS_THRESHOLD: int = 50

HIGH_READINESS_RECOMMENDATIONS: list[str] = [
    "High readiness detected - proceed with AI implementation",
    "Focus on quick wins to build momentum",
]
MODERATE_READINESS_RECOMMENDATIONS: list[str] = [
    "Moderate readiness - start with pilot projects",
    "Invest in change management and training",
]
LOW_READINESS_RECOMMENDATIONS: list[str] = [
    "Low readiness - focus on foundational work",
    "Address barriers before technology implementation",
]

WEAK_DRIVER_THRESHOLD: float = 30.0     # pain / pull below this → gap
STRONG_BARRIER_THRESHOLD: float = 50.0  # anchors / anxiety above this → gap

PAIN_GAP_RECOMMENDATION: str = "Clarify and quantify current pain points"
PULL_GAP_RECOMMENDATION: str = "Develop clearer AI value proposition"
ANCHORS_GAP_RECOMMENDATION: str = "Address organizational resistance and barriers"
ANXIETY_GAP_RECOMMENDATION: str = "Invest in AI education and anxiety reduction"

# ── Output projection ───────────────────────────────────────────────────
# Ordered (threshold, label) bands; first match wins.

READINESS_LEVELS: list[tuple[int, str]] = [
    (80, "Ready to Scale"),
    (70, "Ready to Implement"),
    (60, "Ready with Preparation"),
    (40, "Needs Significant Preparation"),
]
READINESS_LEVEL_FLOOR: str = "Not Ready - Build Foundation First"

DETAILED_INSIGHT_COUNT: int = 3
SUMMARY_TOP_FORCE_COUNT: int = 3
SUMMARY_RECOMMENDATION_COUNT: int = 4

# ── Request limits ──────────────────────────────────────────────────────

DEFAULT_MAX_BATCH_SIZE: int = 20
MIN_DECLARED_WEIGHT: float = 0.1
MAX_DECLARED_WEIGHT: float = 5.0
