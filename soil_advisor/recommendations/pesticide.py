"""
Pesticide recommendations.

Rules (evaluated in display order — every matching rule adds one entry):
    1. pH > 7.5               → Chlorpyrifos 20% EC   (high)
    2. soil is Clay or Silty  → Mancozeb 75% WP       (medium)
    3. always                 → Imidacloprid 17.8% SL (medium)
    4. health score < 6       → Carbendazim 50% WP    (high)

Rule 3 is unconditional, so the list always has 1–4 entries.
"""

from __future__ import annotations

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.models.recommendation import Recommendation
from soil_advisor.taxonomy.soil_taxonomy import Priority, SoilType

ALKALINE_PH_THRESHOLD = 7.5
LOW_HEALTH_SCORE_THRESHOLD = 6.0
HEAVY_SOILS: tuple[SoilType, ...] = (SoilType.CLAY, SoilType.SILTY)


def get_pesticide_recommendations(
    measurement: SoilMeasurement,
    health_score: float,
) -> list[Recommendation]:
    """Build the ordered pesticide list for one measurement."""
    recommendations: list[Recommendation] = []

    if measurement.ph_level > ALKALINE_PH_THRESHOLD:
        recommendations.append(
            Recommendation(
                name="Chlorpyrifos 20% EC",
                application="2 ml/liter water",
                purpose="Termite & root borer control (alkaline soil)",
                priority=Priority.HIGH,
            )
        )

    if measurement.soil_type in HEAVY_SOILS:
        recommendations.append(
            Recommendation(
                name="Mancozeb 75% WP",
                application="2.5 gm/liter water",
                purpose="Fungal disease prevention (heavy soils)",
                priority=Priority.MEDIUM,
            )
        )

    recommendations.append(
        Recommendation(
            name="Imidacloprid 17.8% SL",
            application="0.5 ml/liter water",
            purpose="Sucking pest control",
            priority=Priority.MEDIUM,
        )
    )

    if health_score < LOW_HEALTH_SCORE_THRESHOLD:
        recommendations.append(
            Recommendation(
                name="Carbendazim 50% WP",
                application="1 gm/liter water",
                purpose="Soil-borne disease prevention (low soil health)",
                priority=Priority.HIGH,
            )
        )

    return recommendations
