
from .weighting import quality_multiplier, resolve_effective_weight, weigh_item
from .accumulator import ForceAccumulator, ForceTotals, accumulate_forces
from .normalization_engine import normalize_forces
from .scoring_engine import compute_readiness_score
from .interaction_analyzer import analyze_interactions
from .confidence_analyzer import analyze_confidence
from .recommendation_rules import generate_recommendations
from .output_projector import project, readiness_level
from .calculation_engine import calculate, compute

__all__ = [
    "quality_multiplier",
    "resolve_effective_weight",
    "weigh_item",
    "ForceAccumulator",
    "ForceTotals",
    "accumulate_forces",
    "normalize_forces",
    "compute_readiness_score",
    "analyze_interactions",
    "analyze_confidence",
    "generate_recommendations",
    "project",
    "readiness_level",
    "calculate",
    "compute",
]
