"""
Crop catalog and nutrient-level thresholds — declarative data only.

The matcher in ``crop_matcher`` scores a measurement against every
``CropProfile`` here; adding a crop or changing a weight never requires
touching the matching logic.

Nutrient level thresholds (kg/ha, strictly greater than):
    nitrogen   : > 250 high, > 150 medium, else low
    phosphorus : > 45 high,  > 25 medium,  else low
    potassium  : > 350 high, > 200 medium, else low
"""

from __future__ import annotations

from dataclasses import dataclass

from soil_advisor.taxonomy.soil_taxonomy import (
    IrrigationMethod,
    NutrientLevel,
    Priority,
    SoilType,
)


@dataclass(frozen=True)
class CropProfile:
    """Growing requirements and expectations for one crop.

    Attributes:
        name:            Crop name.
        suitable_soils:  Soil types the crop grows well in.
        ph_range:        Inclusive (low, high) acceptable pH.
        n_requirement:   Nitrogen level the crop wants.
        p_requirement:   Phosphorus level the crop wants.
        k_requirement:   Potassium level the crop wants.
        irrigation:      Compatible irrigation methods.
        timing:          Sowing | harvest windows.
        expected_yield:  Typical yield string.
        priority:        Base priority carried into the match result.
    """

    name:           str
    suitable_soils: tuple[SoilType, ...]
    ph_range:       tuple[float, float]
    n_requirement:  NutrientLevel
    p_requirement:  NutrientLevel
    k_requirement:  NutrientLevel
    irrigation:     tuple[IrrigationMethod, ...]
    timing:         str
    expected_yield: str
    priority:       Priority


@dataclass(frozen=True)
class LevelThresholds:
    """Boundaries above which a nutrient amount counts as medium / high."""

    medium_above: float
    high_above:   float

    def classify(self, value: float) -> NutrientLevel:
        if value > self.high_above:
            return NutrientLevel.HIGH
        if value > self.medium_above:
            return NutrientLevel.MEDIUM
        return NutrientLevel.LOW


NITROGEN_LEVELS   = LevelThresholds(medium_above=150, high_above=250)
PHOSPHORUS_LEVELS = LevelThresholds(medium_above=25,  high_above=45)
POTASSIUM_LEVELS  = LevelThresholds(medium_above=200, high_above=350)


CROP_CATALOG: tuple[CropProfile, ...] = (
    CropProfile(
        name="Wheat",
        suitable_soils=(SoilType.LOAMY, SoilType.CLAY, SoilType.SILTY),
        ph_range=(6.0, 7.5),
        n_requirement=NutrientLevel.MEDIUM,
        p_requirement=NutrientLevel.MEDIUM,
        k_requirement=NutrientLevel.MEDIUM,
        irrigation=(IrrigationMethod.DRIP, IrrigationMethod.SPRINKLER, IrrigationMethod.FLOOD),
        timing="Oct-Nov | Mar-Apr",
        expected_yield="18-22 quintals/acre",
        priority=Priority.HIGH,
    ),
    CropProfile(
        name="Maize",
        suitable_soils=(SoilType.LOAMY, SoilType.SANDY, SoilType.SILTY),
        ph_range=(5.5, 7.5),
        n_requirement=NutrientLevel.HIGH,
        p_requirement=NutrientLevel.MEDIUM,
        k_requirement=NutrientLevel.HIGH,
        irrigation=(IrrigationMethod.DRIP, IrrigationMethod.SPRINKLER),
        timing="Jun-Jul | Sep-Oct",
        expected_yield="25-30 quintals/acre",
        priority=Priority.MEDIUM,
    ),
    CropProfile(
        name="Potato",
        suitable_soils=(SoilType.LOAMY, SoilType.SANDY, SoilType.SILTY),
        ph_range=(5.0, 6.5),
        n_requirement=NutrientLevel.MEDIUM,
        p_requirement=NutrientLevel.HIGH,
        k_requirement=NutrientLevel.HIGH,
        irrigation=(IrrigationMethod.DRIP, IrrigationMethod.SPRINKLER),
        timing="Oct-Nov | Feb-Mar",
        expected_yield="80-100 quintals/acre",
        priority=Priority.HIGH,
    ),
    CropProfile(
        name="Mustard",
        suitable_soils=(SoilType.LOAMY, SoilType.CLAY, SoilType.SILTY),
        ph_range=(6.0, 7.5),
        n_requirement=NutrientLevel.MEDIUM,
        p_requirement=NutrientLevel.MEDIUM,
        k_requirement=NutrientLevel.MEDIUM,
        irrigation=(IrrigationMethod.DRIP, IrrigationMethod.SPRINKLER, IrrigationMethod.FLOOD),
        timing="Oct-Nov | Feb-Mar",
        expected_yield="6-8 quintals/acre",
        priority=Priority.MEDIUM,
    ),
    CropProfile(
        name="Rice",
        suitable_soils=(SoilType.CLAY, SoilType.SILTY),
        ph_range=(5.5, 7.0),
        n_requirement=NutrientLevel.HIGH,
        p_requirement=NutrientLevel.MEDIUM,
        k_requirement=NutrientLevel.MEDIUM,
        irrigation=(IrrigationMethod.FLOOD,),
        timing="Jun-Jul | Oct-Nov",
        expected_yield="25-30 quintals/acre",
        priority=Priority.LOW,
    ),
    CropProfile(
        name="Cotton",
        suitable_soils=(SoilType.SANDY, SoilType.LOAMY),
        ph_range=(6.0, 8.0),
        n_requirement=NutrientLevel.MEDIUM,
        p_requirement=NutrientLevel.MEDIUM,
        k_requirement=NutrientLevel.HIGH,
        irrigation=(IrrigationMethod.DRIP, IrrigationMethod.SPRINKLER),
        timing="Apr-May | Oct-Nov",
        expected_yield="8-12 quintals/acre",
        priority=Priority.MEDIUM,
    ),
)
