"""
Per-soil-type reference lookups for the CLI: target nutrient bands and the
catalog crops that suit a soil.
"""

from __future__ import annotations

from soil_advisor.recommendations.crop_catalog import CROP_CATALOG, CropProfile
from soil_advisor.scoring.ranges import nutrient_ranges_for
from soil_advisor.taxonomy.soil_taxonomy import SoilType

NUTRIENT_UNIT = "kg/ha"


def fertilizer_reference(soil_type: SoilType | str) -> dict[str, dict[str, float | str]]:
    """Return min / ideal / max targets for N, P and K on ``soil_type``.

    Unrecognized soil types get the Loamy targets.

    Returns:
        ``{"nitrogen": {"min": ..., "ideal": ..., "max": ..., "unit": "kg/ha"}, ...}``
    """
    ranges = nutrient_ranges_for(soil_type)
    return {
        name: {"min": rng.min, "ideal": rng.ideal, "max": rng.max, "unit": NUTRIENT_UNIT}
        for name, rng in (
            ("nitrogen", ranges.nitrogen),
            ("phosphorus", ranges.phosphorus),
            ("potassium", ranges.potassium),
        )
    }


def crops_for_soil(
    soil_type: SoilType | str,
    catalog:   tuple[CropProfile, ...] = CROP_CATALOG,
) -> list[CropProfile]:
    """Return catalog crops listing ``soil_type`` as suitable, in catalog order."""
    return [crop for crop in catalog if soil_type in crop.suitable_soils]
