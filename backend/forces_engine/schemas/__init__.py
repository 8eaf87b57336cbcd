# Schemas package
from .enums import ForceCategory, OutputFormat, QualityLabel, WeightingStrategy
from .item_schema import ItemAnalysis, ItemAnalysisInput
from .calculation_schema import (
    CalculationOptions,
    CalculationResult,
    CalculationRun,
    ConfidenceMetrics,
    ForceInteractions,
    ForceResults,
    NormalizedForceResult,
    ProcessingMetadata,
)
from .output_schema import DetailedPayload, RawPayload, SummaryPayload
from .request_schema import CalculationRequest, CalculationResponse

__all__ = [
    "ForceCategory",
    "QualityLabel",
    "WeightingStrategy",
    "OutputFormat",
    "ItemAnalysis",
    "ItemAnalysisInput",
    "CalculationOptions",
    "NormalizedForceResult",
    "ForceResults",
    "ForceInteractions",
    "ConfidenceMetrics",
    "CalculationResult",
    "ProcessingMetadata",
    "CalculationRun",
    "SummaryPayload",
    "DetailedPayload",
    "RawPayload",
    "CalculationRequest",
    "CalculationResponse",
]
