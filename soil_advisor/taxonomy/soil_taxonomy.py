"""
Soil taxonomy: the enumerated vocabularies every soil record is expressed in.

Two input dimensions describe a field:
  - ``SoilType``         — the texture class of the soil.
  - ``IrrigationMethod`` — how the field is watered.

Three output vocabularies label recommendations:
  - ``Priority``      — urgency of a fertilizer/pesticide/crop entry.
  - ``NutrientLevel`` — qualitative N/P/K classification used for crop matching.
  - ``Suitability``   — crop match label.

Values are the exact display strings used in input files and reports
(e.g. ``"Center Pivot"``, ``"Highly Recommended"``).

This module has NO imports from any other ``soil_advisor`` package.
"""

from enum import StrEnum


class SoilType(StrEnum):
    """Soil texture class of the measured field."""

    SANDY = "Sandy"
    """Light, well-draining soil with low nutrient retention."""

    CLAY = "Clay"
    """Heavy soil with high water and nutrient retention."""

    LOAMY = "Loamy"
    """Balanced soil with good drainage and fertility."""

    SILTY = "Silty"
    """Medium-textured soil with good water retention."""

    PEATY = "Peaty"
    """Organic-rich soil with high moisture content."""

    CHALKY = "Chalky"
    """Alkaline soil with good drainage but low nutrient availability."""


class IrrigationMethod(StrEnum):
    """Irrigation system used on the field."""

    DRIP = "Drip"
    """Water-efficient system delivering directly to plant roots."""

    SPRINKLER = "Sprinkler"
    """Overhead irrigation system covering large areas."""

    FLOOD = "Flood"
    """Traditional surface irrigation method."""

    CENTER_PIVOT = "Center Pivot"
    """Mechanized sprinkler system for large fields."""

    MANUAL = "Manual"
    """Hand watering or portable irrigation."""


class Priority(StrEnum):
    """Urgency of a recommendation."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class NutrientLevel(StrEnum):
    """Qualitative classification of a measured or required nutrient amount."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Suitability(StrEnum):
    """How well a crop fits the measured field."""

    SUITABLE = "Suitable"
    """Cleared the minimum match score."""

    HIGHLY_RECOMMENDED = "Highly Recommended"
    """Cleared the highly-recommended match score."""


# ── Catalog descriptions ──────────────────────────────────────────────────────
# Shown by the ``soil-types`` and ``irrigation-types`` CLI commands.

SOIL_TYPE_DESCRIPTIONS: dict[SoilType, str] = {
    SoilType.SANDY:  "Light, well-draining soil with low nutrient retention",
    SoilType.CLAY:   "Heavy soil with high water and nutrient retention",
    SoilType.LOAMY:  "Balanced soil with good drainage and fertility",
    SoilType.SILTY:  "Medium-textured soil with good water retention",
    SoilType.PEATY:  "Organic-rich soil with high moisture content",
    SoilType.CHALKY: "Alkaline soil with good drainage but low nutrient availability",
}

IRRIGATION_DESCRIPTIONS: dict[IrrigationMethod, str] = {
    IrrigationMethod.DRIP:         "Water-efficient system delivering directly to plant roots",
    IrrigationMethod.SPRINKLER:    "Overhead irrigation system covering large areas",
    IrrigationMethod.FLOOD:        "Traditional surface irrigation method",
    IrrigationMethod.CENTER_PIVOT: "Mechanized sprinkler system for large fields",
    IrrigationMethod.MANUAL:       "Hand watering or portable irrigation",
}
