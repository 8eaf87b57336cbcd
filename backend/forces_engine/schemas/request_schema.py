from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .calculation_schema import CalculationOptions
from .item_schema import ItemAnalysisInput


class CalculationRequest(BaseModel):
    """Request body for ``POST /jtbd/calculate``.

    The upper bound on ``items`` is enforced by the route, since it is
    configurable through ``FORCES_MAX_BATCH_SIZE``.
    """

    items: List[ItemAnalysisInput] = Field(
        ...,
        min_length=1,
        description="Classified response items to aggregate",
    )
    options: CalculationOptions = Field(
        default_factory=CalculationOptions,
        description="Weighting, gating and output format switches",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "items": [
                    {
                        "item_id": "q1-r1",
                        "expected_category": "pain_of_old",
                        "declared_weight": 1.0,
                        "assigned_category": "pain_of_old",
                        "strength_score": 4,
                        "confidence_score": 4,
                        "quality_label": "good",
                        "themes": ["manual reporting", "slow approvals"],
                    }
                ],
                "options": {"weighting_strategy": "equal", "output_format": "detailed"},
            }
        }
    }


class ProcessingStats(BaseModel):
    total_requested: int = Field(..., ge=0)
    successfully_analyzed: int = Field(..., ge=0)
    errors: int = Field(default=0, ge=0)
    processing_time_ms: float = Field(default=0.0, ge=0.0)


class ResponseMetadata(BaseModel):
    request_id: str
    timestamp: str
    processing_stats: ProcessingStats
    options: CalculationOptions


class CalculationResponse(BaseModel):
    """Envelope returned by ``POST /jtbd/calculate``."""

    success: bool = True
    calculation: Dict[str, Any] = Field(
        ...,
        description="Projected payload in the requested output format",
    )
    metadata: ResponseMetadata
