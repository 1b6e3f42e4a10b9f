"""
Soil health score calculator: converts a SoilMeasurement into six sub-scores
and a single 0–10 health score.

Score formula
-------------
    overall = round_half_up(sum(sub_scores) / (6 * 10) * 10, 1)

Each sub-score lies in [2, 10], so the overall score lies in [2.0, 10.0].

Sub-score explanations
----------------------
ph, organic_carbon, zinc (band step functions):
    First matching band from the ordered tables in ``scoring.ranges`` wins;
    values outside every band score 2.

nitrogen, phosphorus, potassium (soil-type-specific curves):
    In range   : 10 − |value − ideal| / max(ideal − min, max − ideal) × 4
                 (worst in-range value still scores 6).
    Below min  : max(2, 6 − (min − value) / min × 4)
    Above max  : max(2, 6 − (value − max) / max × 4)
    Each rounded half-up to one decimal.

All functions are pure — no I/O, no state.
"""

from __future__ import annotations

from dataclasses import dataclass

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.scoring.ranges import (
    BAND_FLOOR_SCORE,
    ORGANIC_CARBON_BANDS,
    PH_BANDS,
    ZINC_BANDS,
    Band,
    NutrientRange,
    nutrient_ranges_for,
)
from soil_advisor.utils.numeric import round_half_up

SUB_SCORE_COUNT = 6
SUB_SCORE_MAX = 10.0


@dataclass(frozen=True)
class ScoreComponents:
    """The six sub-scores behind a health score.

    Attributes:
        ph:             pH band score.
        nitrogen:       Nitrogen curve score for the soil type.
        phosphorus:     Phosphorus curve score for the soil type.
        potassium:      Potassium curve score for the soil type.
        organic_carbon: Organic carbon band score.
        zinc:           Zinc band score.
    """

    ph:             float
    nitrogen:       float
    phosphorus:     float
    potassium:      float
    organic_carbon: float
    zinc:           float

    @property
    def total(self) -> float:
        """Raw sum of all sub-scores (12–60)."""
        return (
            self.ph
            + self.nitrogen
            + self.phosphorus
            + self.potassium
            + self.organic_carbon
            + self.zinc
        )

    @property
    def overall(self) -> float:
        """Health score on the 0–10 scale, one decimal place."""
        return round_half_up(
            (self.total / (SUB_SCORE_COUNT * SUB_SCORE_MAX)) * 10, 1
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "ph":             self.ph,
            "nitrogen":       self.nitrogen,
            "phosphorus":     self.phosphorus,
            "potassium":      self.potassium,
            "organic_carbon": self.organic_carbon,
            "zinc":           self.zinc,
        }


def band_score(value: float, bands: tuple[Band, ...]) -> float:
    """Score ``value`` against an ordered band table (first match wins)."""
    for lower, upper, score in bands:
        if lower <= value <= upper:
            return score
    return BAND_FLOOR_SCORE


def ph_score(ph_level: float) -> float:
    return band_score(ph_level, PH_BANDS)


def organic_carbon_score(organic_carbon: float) -> float:
    return band_score(organic_carbon, ORGANIC_CARBON_BANDS)


def zinc_score(zinc: float) -> float:
    return band_score(zinc, ZINC_BANDS)


def nutrient_score(value: float, rng: NutrientRange) -> float:
    """Score a nutrient amount against its soil-type range.

    Args:
        value: Measured amount (kg/ha).
        rng:   The soil-type-specific ``NutrientRange``.

    Returns:
        Sub-score in [2, 10], rounded half-up to one decimal.
    """
    if rng.min <= value <= rng.max:
        deviation = abs(value - rng.ideal)
        max_deviation = max(rng.ideal - rng.min, rng.max - rng.ideal)
        score = 10 - (deviation / max_deviation) * 4
    elif value < rng.min:
        deficit = rng.min - value
        score = max(2.0, 6 - (deficit / rng.min) * 4)
    else:
        excess = value - rng.max
        score = max(2.0, 6 - (excess / rng.max) * 4)
    return round_half_up(score, 1)


def compute_score_components(measurement: SoilMeasurement) -> ScoreComponents:
    """Compute all six sub-scores for one measurement.

    Args:
        measurement: A validated ``SoilMeasurement``.

    Returns:
        ``ScoreComponents`` with every field populated.
    """
    ranges = nutrient_ranges_for(measurement.soil_type)
    return ScoreComponents(
        ph=ph_score(measurement.ph_level),
        nitrogen=nutrient_score(measurement.nitrogen, ranges.nitrogen),
        phosphorus=nutrient_score(measurement.phosphorus, ranges.phosphorus),
        potassium=nutrient_score(measurement.potassium, ranges.potassium),
        organic_carbon=organic_carbon_score(measurement.organic_carbon),
        zinc=zinc_score(measurement.zinc),
    )


def compute_health_score(measurement: SoilMeasurement) -> float:
    """Return the 0–10 health score (one decimal) for ``measurement``."""
    return compute_score_components(measurement).overall
