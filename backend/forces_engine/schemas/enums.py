"""Closed vocabularies used across the forces engine.

CORE PRINCIPLES:
- Force categories are a fixed five-member taxonomy, never extended at runtime
- Every lookup keyed on these enums must cover every member
"""

from enum import Enum


class ForceCategory(str, Enum):
    """
    FIVE LATENT FORCES OF ADOPTION

    Drivers (push toward change):
    - pain_of_old: frustration with the current way of working
    - pull_of_new: attraction to the new approach

    Inhibitors (hold back change):
    - anchors_to_old: habits and investments tying people to the status quo
    - anxiety_of_new: fear or uncertainty about the new approach

    Context only (never scored):
    - demographic: background information about the respondent
    """
    PAIN_OF_OLD = "pain_of_old"
    PULL_OF_NEW = "pull_of_new"
    ANCHORS_TO_OLD = "anchors_to_old"
    ANXIETY_OF_NEW = "anxiety_of_new"
    DEMOGRAPHIC = "demographic"


# Fixed evaluation order for rules that walk the scored categories
SCORED_CATEGORIES = (
    ForceCategory.PAIN_OF_OLD,
    ForceCategory.PULL_OF_NEW,
    ForceCategory.ANCHORS_TO_OLD,
    ForceCategory.ANXIETY_OF_NEW,
)


class QualityLabel(str, Enum):
    """Response quality as judged by the upstream classifier."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class WeightingStrategy(str, Enum):
    """How an item's declared weight becomes its effective weight."""
    EQUAL = "equal"
    CONFIDENCE = "confidence"
    QUALITY = "quality"
    CUSTOM = "custom"


class OutputFormat(str, Enum):
    """Externally visible payload shapes."""
    SUMMARY = "summary"
    DETAILED = "detailed"
    RAW = "raw"
