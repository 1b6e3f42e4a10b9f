"""
Fertilizer recommendations: dose each N/P/K deficit with a single-nutrient
product, add zinc sulphate for low zinc, and fall back to a balanced NPK
maintenance dose when nothing is deficient.

Dose formula
------------
    deficit  = ideal − measured            (only when measured < soil min)
    quantity = round_half_up(deficit × conversion_factor × land_area)  kg/total

Conversion factors turn an elemental nutrient deficit into product mass:
    nitrogen   → Urea (46-0-0)               × 2.17
    phosphorus → DAP (18-46-0)               × 4.35
    potassium  → Muriate of Potash (0-0-60)  × 1.67

Zinc below 0.6 ppm always adds 25 kg/acre of zinc sulphate, regardless of
soil type.  An empty result is replaced by one low-priority
"Balanced NPK Fertilizer" entry at 100 kg/acre.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.models.recommendation import Recommendation
from soil_advisor.scoring.ranges import nutrient_ranges_for
from soil_advisor.taxonomy.soil_taxonomy import Priority
from soil_advisor.utils.numeric import round_to_int

logger = logging.getLogger(__name__)

ZINC_DEFICIENCY_PPM = 0.6
ZINC_SULPHATE_KG_PER_ACRE = 25
MAINTENANCE_KG_PER_ACRE = 100


@dataclass(frozen=True)
class NutrientFertilizer:
    """Product used to correct a deficit of one primary nutrient."""

    nutrient:          str
    product:           str
    conversion_factor: float
    frequency:         str
    purpose:           str
    priority:          Priority


NUTRIENT_FERTILIZERS: tuple[NutrientFertilizer, ...] = (
    NutrientFertilizer(
        nutrient="nitrogen",
        product="Urea (46-0-0)",
        conversion_factor=2.17,
        frequency="Before sowing & 30 days after",
        purpose="Nitrogen supplementation",
        priority=Priority.HIGH,
    ),
    NutrientFertilizer(
        nutrient="phosphorus",
        product="DAP (18-46-0)",
        conversion_factor=4.35,
        frequency="At the time of sowing",
        purpose="Phosphorus supplementation",
        priority=Priority.HIGH,
    ),
    NutrientFertilizer(
        nutrient="potassium",
        product="Muriate of Potash (0-0-60)",
        conversion_factor=1.67,
        frequency="Before sowing",
        purpose="Potassium supplementation",
        priority=Priority.MEDIUM,
    ),
)


def get_fertilizer_recommendations(
    measurement: SoilMeasurement,
    health_score: float,
) -> list[Recommendation]:
    """Build the ordered fertilizer list for one measurement.

    Args:
        measurement:  A validated ``SoilMeasurement``.
        health_score: The measurement's health score (not used by the
                      dosing rules; accepted so every generator shares one
                      signature).

    Returns:
        Non-empty list of ``Recommendation`` in N, P, K, zinc order.
    """
    ranges = nutrient_ranges_for(measurement.soil_type)
    recommendations: list[Recommendation] = []

    for source in NUTRIENT_FERTILIZERS:
        value = getattr(measurement, source.nutrient)
        rng = getattr(ranges, source.nutrient)
        if value >= rng.min:
            continue
        deficit = rng.ideal - value
        quantity = round_to_int(deficit * source.conversion_factor * measurement.land_area)
        logger.debug(
            "%s deficit %.1f kg/ha -> %s %d kg",
            source.nutrient, deficit, source.product, quantity,
        )
        recommendations.append(
            Recommendation(
                name=source.product,
                application=_kg_total(quantity),
                frequency=source.frequency,
                purpose=source.purpose,
                priority=source.priority,
            )
        )

    if measurement.zinc < ZINC_DEFICIENCY_PPM:
        recommendations.append(
            Recommendation(
                name="Zinc Sulphate",
                application=_kg_total(
                    round_to_int(ZINC_SULPHATE_KG_PER_ACRE * measurement.land_area)
                ),
                frequency="Once before sowing",
                purpose="Zinc micronutrient",
                priority=Priority.MEDIUM,
            )
        )

    if not recommendations:
        recommendations.append(
            Recommendation(
                name="Balanced NPK Fertilizer",
                application=_kg_total(
                    round_to_int(MAINTENANCE_KG_PER_ACRE * measurement.land_area)
                ),
                frequency="Maintenance application",
                purpose="General soil health",
                priority=Priority.LOW,
            )
        )

    return recommendations


def _kg_total(quantity: int) -> str:
    return f"{quantity} kg/total"
