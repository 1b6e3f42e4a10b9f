"""
Fixed agronomic reference tables used by both the score calculator and the
recommendation generator.

Nutrient ranges
---------------
Each soil type has its own acceptable band for nitrogen, phosphorus and
potassium (kg/ha).  Sandy soils retain less nitrogen than clay, so their
ideal sits lower; chalky soils lock up phosphorus and potassium, so theirs
sit higher.

    soil     N min/max/ideal   P min/max/ideal   K min/max/ideal
    Sandy    200/280/240       30/50/40          250/400/325
    Clay     250/350/300       40/60/50          300/500/400
    Loamy    250/300/275       40/50/45          300/400/350
    Silty    220/320/270       35/55/45          280/450/365
    Peaty    180/260/220       25/45/35          200/350/275
    Chalky   200/300/250       45/65/55          350/550/450

An unrecognized soil type falls back to the Loamy ranges rather than
raising.

Band tables
-----------
pH, organic carbon and zinc are scored by nested bands.  Each table is an
ordered tuple of ``(lower, upper, score)`` rows, tightest band first; the
first row whose inclusive interval contains the value wins, and anything
outside every row scores ``BAND_FLOOR_SCORE``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from soil_advisor.taxonomy.soil_taxonomy import SoilType

logger = logging.getLogger(__name__)

FALLBACK_SOIL_TYPE = SoilType.LOAMY
BAND_FLOOR_SCORE = 2.0

Band = tuple[float, float, float]


@dataclass(frozen=True)
class NutrientRange:
    """Acceptable band for one nutrient on one soil type.

    Attributes:
        min:   Lowest value still considered adequate.
        max:   Highest value still considered adequate.
        ideal: Target value; scores 10 when hit exactly.
    """

    min:   float
    max:   float
    ideal: float

    def __post_init__(self) -> None:
        if not self.min < self.ideal < self.max:
            raise ValueError(
                f"NutrientRange requires min < ideal < max, "
                f"got {self.min}/{self.ideal}/{self.max}."
            )


@dataclass(frozen=True)
class SoilNutrientRanges:
    """N, P and K bands for a single soil type."""

    nitrogen:   NutrientRange
    phosphorus: NutrientRange
    potassium:  NutrientRange


NUTRIENT_RANGES: dict[SoilType, SoilNutrientRanges] = {
    SoilType.SANDY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=200, max=280, ideal=240),
        phosphorus=NutrientRange(min=30, max=50, ideal=40),
        potassium=NutrientRange(min=250, max=400, ideal=325),
    ),
    SoilType.CLAY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=250, max=350, ideal=300),
        phosphorus=NutrientRange(min=40, max=60, ideal=50),
        potassium=NutrientRange(min=300, max=500, ideal=400),
    ),
    SoilType.LOAMY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=250, max=300, ideal=275),
        phosphorus=NutrientRange(min=40, max=50, ideal=45),
        potassium=NutrientRange(min=300, max=400, ideal=350),
    ),
    SoilType.SILTY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=220, max=320, ideal=270),
        phosphorus=NutrientRange(min=35, max=55, ideal=45),
        potassium=NutrientRange(min=280, max=450, ideal=365),
    ),
    SoilType.PEATY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=180, max=260, ideal=220),
        phosphorus=NutrientRange(min=25, max=45, ideal=35),
        potassium=NutrientRange(min=200, max=350, ideal=275),
    ),
    SoilType.CHALKY: SoilNutrientRanges(
        nitrogen=NutrientRange(min=200, max=300, ideal=250),
        phosphorus=NutrientRange(min=45, max=65, ideal=55),
        potassium=NutrientRange(min=350, max=550, ideal=450),
    ),
}

PH_BANDS: tuple[Band, ...] = (
    (6.0, 7.5, 10.0),
    (5.5, 8.0, 8.0),
    (5.0, 8.5, 6.0),
    (4.5, 9.0, 4.0),
)

ORGANIC_CARBON_BANDS: tuple[Band, ...] = (
    (0.75, 2.0, 10.0),
    (0.5,  3.0, 8.0),
    (0.3,  4.0, 6.0),
    (0.2,  5.0, 4.0),
)

ZINC_BANDS: tuple[Band, ...] = (
    (0.6, 2.0, 10.0),
    (0.4, 3.0, 8.0),
    (0.3, 4.0, 6.0),
    (0.2, 5.0, 4.0),
)


def nutrient_ranges_for(soil_type: SoilType | str) -> SoilNutrientRanges:
    """Return the N/P/K ranges for ``soil_type``, falling back to Loamy.

    Args:
        soil_type: A ``SoilType`` member or its display string.

    Returns:
        The matching ``SoilNutrientRanges``; the Loamy ranges when the soil
        type is not recognized.
    """
    try:
        return NUTRIENT_RANGES[SoilType(soil_type)]
    except ValueError:
        logger.debug(
            "Unknown soil type %r; using %s nutrient ranges.",
            soil_type, FALLBACK_SOIL_TYPE.value,
        )
        return NUTRIENT_RANGES[FALLBACK_SOIL_TYPE]
