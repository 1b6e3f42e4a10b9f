"""
Recommendation generator: runs the fertilizer, pesticide and crop rules for
one measurement and bundles the results.
"""

from __future__ import annotations

import logging

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.models.recommendation import RecommendationSet
from soil_advisor.recommendations.crop_matcher import (
    CropMatchSettings,
    get_crop_recommendations,
)
from soil_advisor.recommendations.fertilizer import get_fertilizer_recommendations
from soil_advisor.recommendations.pesticide import get_pesticide_recommendations

logger = logging.getLogger(__name__)


def compute_recommendations(
    measurement:   SoilMeasurement,
    health_score:  float,
    crop_settings: CropMatchSettings | None = None,
) -> RecommendationSet:
    """Derive fertilizer, pesticide and crop recommendations.

    Args:
        measurement:   A validated ``SoilMeasurement``.
        health_score:  Score from ``compute_health_score(measurement)``.
        crop_settings: Optional override of the crop ranking thresholds.

    Returns:
        ``RecommendationSet``; fertilizers and pesticides are never empty,
        crops may hold 0–top_n entries.
    """
    result = RecommendationSet(
        fertilizers=get_fertilizer_recommendations(measurement, health_score),
        pesticides=get_pesticide_recommendations(measurement, health_score),
        crops=get_crop_recommendations(measurement, health_score, crop_settings),
    )
    logger.debug(
        "Recommendations for %s: %d fertilizer(s), %d pesticide(s), %d crop(s)",
        measurement.location,
        len(result.fertilizers), len(result.pesticides), len(result.crops),
    )
    return result
