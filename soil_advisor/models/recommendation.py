"""
Recommendation output models.

``Recommendation`` is one fertilizer or pesticide entry: product name,
application quantity, optional frequency, purpose and priority.

``CropMatch`` is one ranked crop suggestion with its additive match score.

``RecommendationSet`` bundles the three lists produced for one measurement.

All models are frozen. They serialize to the response shape API clients
consume (``model_dump(by_alias=True, exclude_none=True)``):
the crop yield estimate is emitted under the key ``"yield"`` and pesticide
entries carry no ``frequency`` key.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soil_advisor.taxonomy.soil_taxonomy import Priority, Suitability


class Recommendation(BaseModel):
    """A fertilizer or pesticide recommendation.

    Attributes:
        name: Product name, e.g. ``"Urea (46-0-0)"``.
        application: Quantity and unit, e.g. ``"903 kg/total"``.
        frequency: When to apply; ``None`` for pesticide entries.
        purpose: What the application addresses.
        priority: Urgency of the recommendation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    application: str
    frequency: Optional[str] = None
    purpose: str
    priority: Priority

    @field_validator("name", "application", "purpose")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Recommendation text fields must not be empty.")
        return v.strip()


class CropMatch(BaseModel):
    """A crop that matched the measured field well enough to suggest.

    Attributes:
        name: Crop name.
        timing: Sowing | harvest windows, e.g. ``"Oct-Nov | Mar-Apr"``.
        expected_yield: Yield estimate string (serialized as ``"yield"``).
        suitability: ``Suitable`` or ``Highly Recommended``.
        score: Additive match score.
        priority: Base priority carried over from the crop catalog.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    timing: str
    expected_yield: str = Field(alias="yield")
    suitability: Suitability
    score: int = Field(ge=0, le=10)
    priority: Priority


class RecommendationSet(BaseModel):
    """The three recommendation lists derived for one measurement."""

    model_config = ConfigDict(frozen=True)

    fertilizers: list[Recommendation]
    pesticides: list[Recommendation]
    crops: list[CropMatch]

    def to_payload(self) -> dict[str, Any]:
        """Return the lists as plain JSON-compatible dicts."""
        return {
            "fertilizers": [_dump(r) for r in self.fertilizers],
            "pesticides": [_dump(r) for r in self.pesticides],
            "recommended_crops": [_dump(c) for c in self.crops],
        }


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
