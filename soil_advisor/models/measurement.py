"""
Soil measurement input model.

``SoilMeasurement`` is the single record the scoring engine consumes: land
area, location, soil texture, irrigation method and the six measured soil
properties (pH, N, P, K, organic carbon, zinc).

The model is frozen — once a measurement is submitted it is never mutated.
All derived values (health score, recommendations) are recomputed from it on
every call.

Validation here is the only gate against malformed input; the scoring and
recommendation functions assume a structurally valid record.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soil_advisor.taxonomy.soil_taxonomy import IrrigationMethod, SoilType

LOCATION_MIN_LENGTH = 3
LOCATION_MAX_LENGTH = 100
LAND_AREA_MAX_ACRES = 1_000_000


class SoilMeasurement(BaseModel):
    """One soil test result for a field.

    Attributes:
        land_area: Field size in acres; positive, at most
            ``LAND_AREA_MAX_ACRES``.
        location: Free-text field location, 3–100 characters as given
            (surrounding whitespace counts and is kept).
        soil_type: Soil texture class.
        irrigation: Irrigation method used on the field.
        ph_level: Soil pH on the 0–14 scale.
        nitrogen: Available nitrogen in kg/ha.
        phosphorus: Available phosphorus in kg/ha.
        potassium: Available potassium in kg/ha.
        organic_carbon: Organic carbon content in percent (0–100).
        zinc: Available zinc in ppm.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    land_area: float = Field(gt=0, le=LAND_AREA_MAX_ACRES)
    location: str
    soil_type: SoilType
    irrigation: IrrigationMethod
    ph_level: float = Field(ge=0, le=14)
    nitrogen: float = Field(ge=0)
    phosphorus: float = Field(ge=0)
    potassium: float = Field(ge=0)
    organic_carbon: float = Field(ge=0, le=100)
    zinc: float = Field(ge=0)

    @field_validator("location")
    @classmethod
    def validate_location_length(cls, v: str) -> str:
        if not LOCATION_MIN_LENGTH <= len(v) <= LOCATION_MAX_LENGTH:
            raise ValueError(
                f"location must be {LOCATION_MIN_LENGTH}–{LOCATION_MAX_LENGTH} "
                f"characters, got {len(v)}."
            )
        return v
