"""
Soil analysis facade — the two operations collaborators call, plus a
convenience wrapper that runs both.

Usage flow
----------
1. compute_health_score(measurement)
   -> float  (0–10, one decimal)

2. compute_recommendations(measurement, health_score)
   -> RecommendationSet  (fertilizers, pesticides, crops)

3. analyze_measurement(measurement)
   -> SoilAnalysis  (1 + 2 together, with the sub-score breakdown)

Everything is recomputed from the measurement on every call; nothing is
cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.models.recommendation import RecommendationSet
from soil_advisor.recommendations.crop_matcher import CropMatchSettings
from soil_advisor.recommendations.generator import compute_recommendations
from soil_advisor.scoring.calculator import (
    ScoreComponents,
    compute_health_score,
    compute_score_components,
)

if TYPE_CHECKING:
    from soil_advisor.config import AnalysisConfig

logger = logging.getLogger(__name__)

__all__ = [
    "SoilAnalysis",
    "analyze_batch",
    "analyze_measurement",
    "compute_health_score",
    "compute_recommendations",
    "crop_settings_from_config",
]


@dataclass(frozen=True)
class SoilAnalysis:
    """A measurement together with everything derived from it.

    Attributes:
        measurement:     The input record (unchanged).
        health_score:    0–10 health score.
        components:      The six sub-scores behind ``health_score``.
        recommendations: Fertilizer, pesticide and crop lists.
    """

    measurement:     SoilMeasurement
    health_score:    float
    components:      ScoreComponents
    recommendations: RecommendationSet

    def to_payload(self) -> dict[str, Any]:
        """Return the response shape: ``soil_score`` plus the three lists."""
        return {"soil_score": self.health_score, **self.recommendations.to_payload()}


def crop_settings_from_config(config: "AnalysisConfig") -> CropMatchSettings:
    """Build ``CropMatchSettings`` from the ``[analysis]`` config section."""
    return CropMatchSettings(
        min_score=config.min_crop_score,
        highly_recommended_score=config.highly_recommended_score,
        top_n=config.top_n_crops,
    )


def analyze_measurement(
    measurement:   SoilMeasurement,
    crop_settings: CropMatchSettings | None = None,
) -> SoilAnalysis:
    """Score ``measurement`` and derive its recommendations.

    Args:
        measurement:   A validated ``SoilMeasurement``.
        crop_settings: Optional override of the crop ranking thresholds.

    Returns:
        ``SoilAnalysis`` with all fields populated.
    """
    components = compute_score_components(measurement)
    health_score = components.overall
    recommendations = compute_recommendations(measurement, health_score, crop_settings)
    logger.info(
        "Analyzed %s (%s, %s): score=%.1f",
        measurement.location,
        measurement.soil_type,
        measurement.irrigation,
        health_score,
    )
    return SoilAnalysis(
        measurement=measurement,
        health_score=health_score,
        components=components,
        recommendations=recommendations,
    )


def analyze_batch(
    measurements:  list[SoilMeasurement],
    crop_settings: CropMatchSettings | None = None,
) -> list[SoilAnalysis]:
    """Analyze every measurement in order."""
    return [analyze_measurement(m, crop_settings) for m in measurements]
