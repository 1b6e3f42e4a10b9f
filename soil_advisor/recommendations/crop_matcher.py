"""
Crop matcher: scores a measurement against every catalog crop, keeps the
crops that clear a minimum score, and returns the best few.

Match score (additive, integer)
-------------------------------
    + soil      (3)  soil_type is in the crop's suitable soils
    + ph        (2)  ph_level within the crop's inclusive pH range
    + nutrient  (1)  each of N/P/K whose level equals the crop's requirement
    + irrigation(2)  irrigation method is compatible
    max = 3 + 2 + 3×1 + 2 = 10

Ranking
-------
    1. Keep crops with score >= min_score (default 5).
    2. Label score >= highly_recommended_score (default 7) as
       "Highly Recommended", everything else "Suitable".
    3. Sort by score descending.  ``sorted`` is stable, so catalog order
       breaks ties.
    4. Return at most top_n (default 4); fewer (possibly none) when fewer
       crops qualify.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.models.recommendation import CropMatch
from soil_advisor.recommendations.crop_catalog import (
    CROP_CATALOG,
    NITROGEN_LEVELS,
    PHOSPHORUS_LEVELS,
    POTASSIUM_LEVELS,
    CropProfile,
)
from soil_advisor.taxonomy.soil_taxonomy import NutrientLevel, Suitability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchWeights:
    """Points awarded per matching criterion."""

    soil:       int = 3
    ph:         int = 2
    nutrient:   int = 1
    irrigation: int = 2


@dataclass(frozen=True)
class CropMatchSettings:
    """Filtering and truncation parameters for the ranked crop list."""

    min_score:                int = 5
    highly_recommended_score: int = 7
    top_n:                    int = 4


@dataclass(frozen=True)
class NutrientLevels:
    """Qualitative N/P/K levels of one measurement."""

    n: NutrientLevel
    p: NutrientLevel
    k: NutrientLevel


DEFAULT_WEIGHTS = MatchWeights()
DEFAULT_SETTINGS = CropMatchSettings()


def classify_nutrient_levels(measurement: SoilMeasurement) -> NutrientLevels:
    """Classify the measurement's N, P and K as low / medium / high."""
    return NutrientLevels(
        n=NITROGEN_LEVELS.classify(measurement.nitrogen),
        p=PHOSPHORUS_LEVELS.classify(measurement.phosphorus),
        k=POTASSIUM_LEVELS.classify(measurement.potassium),
    )


def score_crop(
    crop:        CropProfile,
    measurement: SoilMeasurement,
    levels:      NutrientLevels,
    weights:     MatchWeights = DEFAULT_WEIGHTS,
) -> int:
    """Return the additive match score of ``measurement`` for ``crop``."""
    score = 0
    if measurement.soil_type in crop.suitable_soils:
        score += weights.soil
    ph_low, ph_high = crop.ph_range
    if ph_low <= measurement.ph_level <= ph_high:
        score += weights.ph
    if crop.n_requirement == levels.n:
        score += weights.nutrient
    if crop.p_requirement == levels.p:
        score += weights.nutrient
    if crop.k_requirement == levels.k:
        score += weights.nutrient
    if measurement.irrigation in crop.irrigation:
        score += weights.irrigation
    return score


def rank_crops(
    measurement: SoilMeasurement,
    catalog:     tuple[CropProfile, ...] = CROP_CATALOG,
    settings:    CropMatchSettings = DEFAULT_SETTINGS,
    weights:     MatchWeights = DEFAULT_WEIGHTS,
) -> list[CropMatch]:
    """Score, filter and rank every crop in ``catalog``.

    Args:
        measurement: A validated ``SoilMeasurement``.
        catalog:     Crop profiles to score, in tie-break order.
        settings:    Minimum score, highly-recommended score and top-N.
        weights:     Points per matching criterion.

    Returns:
        Up to ``settings.top_n`` ``CropMatch`` objects, best first.
    """
    levels = classify_nutrient_levels(measurement)
    matches: list[CropMatch] = []

    for crop in catalog:
        score = score_crop(crop, measurement, levels, weights)
        logger.debug("Crop %s scored %d", crop.name, score)
        if score < settings.min_score:
            continue
        suitability = (
            Suitability.HIGHLY_RECOMMENDED
            if score >= settings.highly_recommended_score
            else Suitability.SUITABLE
        )
        matches.append(
            CropMatch(
                name=crop.name,
                timing=crop.timing,
                expected_yield=crop.expected_yield,
                suitability=suitability,
                score=score,
                priority=crop.priority,
            )
        )

    ranked = sorted(matches, key=lambda m: -m.score)
    return ranked[: settings.top_n]


def get_crop_recommendations(
    measurement:  SoilMeasurement,
    health_score: float,
    settings:     CropMatchSettings | None = None,
) -> list[CropMatch]:
    """Return the ranked crop list for one measurement (0–top_n entries)."""
    return rank_crops(measurement, settings=settings or DEFAULT_SETTINGS)
