from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..constants import MAX_DECLARED_WEIGHT, MIN_DECLARED_WEIGHT
from .enums import ForceCategory


class ItemAnalysis(BaseModel):
    """One classified response item, as produced by the upstream classifier.

    Aggregation always trusts ``assigned_category``; ``expected_category``
    is carried for reference only.  Strength and confidence outside 1-5
    are rejected here, so the engine never sees them.
    """

    model_config = ConfigDict(frozen=True)

    item_id: str = Field(
        ...,
        min_length=1,
        description="Identifier of the response item",
    )
    expected_category: ForceCategory = Field(
        ...,
        description="Force the question was designed to elicit",
    )
    declared_weight: float = Field(
        default=1.0,
        gt=0.0,
        description="Question weight before the weighting strategy is applied (typically 0.1-5.0)",
    )
    assigned_category: ForceCategory = Field(
        ...,
        description="Force the classifier actually assigned; used for aggregation",
    )
    strength_score: float = Field(
        ...,
        ge=1.0,
        le=5.0,
        description="Force strength on a 1-5 scale",
    )
    confidence_score: float = Field(
        ...,
        ge=1.0,
        le=5.0,
        description="Classifier confidence on a 1-5 scale",
    )
    quality_label: str = Field(
        default="good",
        description="Response quality: excellent, good, fair or poor (others weigh 1.0)",
    )
    themes: List[str] = Field(
        default_factory=list,
        description="Key themes extracted from the response",
    )


class ItemAnalysisInput(ItemAnalysis):
    """``ItemAnalysis`` as accepted over HTTP, with the request weight bounds."""

    declared_weight: float = Field(
        default=1.0,
        ge=MIN_DECLARED_WEIGHT,
        le=MAX_DECLARED_WEIGHT,
        description="Question weight, 0.1-5.0",
    )
