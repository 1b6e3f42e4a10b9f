"""
Tests for soil_advisor/recommendations/crop_matcher.py.

What we test
------------
classify_nutrient_levels():
  - Thresholds are strict (> medium_above, > high_above).

score_crop():
  - Each criterion adds its weight; a perfect match scores 10.
  - Custom weights change the total.

rank_crops() / get_crop_recommendations():
  - Crops under the minimum score are dropped.
  - Suitability label flips at the highly-recommended score.
  - Score-descending order with catalog order breaking ties.
  - At most top_n results; fewer (or none) when fewer qualify.
  - Settings overrides are honoured.
  - Custom catalogs are scored by the same generic logic.
"""

from __future__ import annotations

import pytest

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.recommendations.crop_catalog import (
    CROP_CATALOG,
    NITROGEN_LEVELS,
    PHOSPHORUS_LEVELS,
    POTASSIUM_LEVELS,
    CropProfile,
)
from soil_advisor.recommendations.crop_matcher import (
    CropMatchSettings,
    MatchWeights,
    NutrientLevels,
    classify_nutrient_levels,
    get_crop_recommendations,
    rank_crops,
    score_crop,
)
from soil_advisor.taxonomy.soil_taxonomy import (
    IrrigationMethod,
    NutrientLevel,
    Priority,
    SoilType,
    Suitability,
)

CATALOG_BY_NAME = {crop.name: crop for crop in CROP_CATALOG}


# ── Helpers ────────────────────────────────────────────────────────────────────

def _measurement(**overrides) -> SoilMeasurement:
    fields = dict(
        land_area=1.0,
        location="Test Field",
        soil_type=SoilType.LOAMY,
        irrigation=IrrigationMethod.DRIP,
        ph_level=6.5,
        nitrogen=275,
        phosphorus=45,
        potassium=350,
        organic_carbon=1.0,
        zinc=1.0,
    )
    fields.update(overrides)
    return SoilMeasurement(**fields)


def _crop(**overrides) -> CropProfile:
    fields = dict(
        name="Millet",
        suitable_soils=(SoilType.SANDY,),
        ph_range=(5.0, 7.0),
        n_requirement=NutrientLevel.LOW,
        p_requirement=NutrientLevel.LOW,
        k_requirement=NutrientLevel.LOW,
        irrigation=(IrrigationMethod.MANUAL,),
        timing="Jun-Jul | Sep-Oct",
        expected_yield="8-10 quintals/acre",
        priority=Priority.LOW,
    )
    fields.update(overrides)
    return CropProfile(**fields)


# ── Nutrient levels ───────────────────────────────────────────────────────────

class TestNutrientLevels:
    @pytest.mark.parametrize(
        "value, expected",
        [(250, NutrientLevel.MEDIUM), (251, NutrientLevel.HIGH),
         (150, NutrientLevel.LOW), (151, NutrientLevel.MEDIUM), (0, NutrientLevel.LOW)],
    )
    def test_nitrogen_thresholds(self, value, expected):
        assert NITROGEN_LEVELS.classify(value) == expected

    def test_phosphorus_thresholds(self):
        assert PHOSPHORUS_LEVELS.classify(45) == NutrientLevel.MEDIUM
        assert PHOSPHORUS_LEVELS.classify(45.1) == NutrientLevel.HIGH
        assert PHOSPHORUS_LEVELS.classify(25) == NutrientLevel.LOW

    def test_potassium_thresholds(self):
        assert POTASSIUM_LEVELS.classify(350) == NutrientLevel.MEDIUM
        assert POTASSIUM_LEVELS.classify(352) == NutrientLevel.HIGH
        assert POTASSIUM_LEVELS.classify(200) == NutrientLevel.LOW

    def test_reference_field_levels(self, sample_measurement):
        levels = classify_nutrient_levels(sample_measurement)
        assert levels == NutrientLevels(
            n=NutrientLevel.MEDIUM, p=NutrientLevel.MEDIUM, k=NutrientLevel.HIGH
        )


# ── Scoring ───────────────────────────────────────────────────────────────────

class TestScoreCrop:
    def test_wheat_on_balanced_loam(self, balanced_measurement):
        levels = classify_nutrient_levels(balanced_measurement)
        # soil 3 + pH 2 + P 1 + K 1 + irrigation 2 (N is high, wheat wants medium)
        assert score_crop(CATALOG_BY_NAME["Wheat"], balanced_measurement, levels) == 9

        wheat = next(
            c for c in get_crop_recommendations(balanced_measurement, 10.0) if c.name == "Wheat"
        )
        assert wheat.score == 9
        assert wheat.suitability == Suitability.HIGHLY_RECOMMENDED

    def test_perfect_match_scores_ten(self, sample_measurement):
        levels = classify_nutrient_levels(sample_measurement)
        assert score_crop(CATALOG_BY_NAME["Cotton"], sample_measurement, levels) == 10

    def test_nothing_matches_scores_zero(self):
        m = _measurement(
            soil_type=SoilType.PEATY, irrigation=IrrigationMethod.CENTER_PIVOT,
            ph_level=4.0, nitrogen=0, phosphorus=0, potassium=0,
        )
        levels = classify_nutrient_levels(m)
        for crop in CROP_CATALOG:
            assert score_crop(crop, m, levels) == 0

    def test_ph_range_is_inclusive(self):
        crop = _crop(ph_range=(6.0, 7.0))
        for ph in (6.0, 7.0):
            m = _measurement(ph_level=ph)
            assert score_crop(crop, m, classify_nutrient_levels(m)) == 2

    def test_custom_weights(self, sample_measurement):
        levels = classify_nutrient_levels(sample_measurement)
        weights = MatchWeights(soil=5, ph=1, nutrient=0, irrigation=1)
        assert score_crop(CATALOG_BY_NAME["Cotton"], sample_measurement, levels, weights) == 7


# ── Ranking ───────────────────────────────────────────────────────────────────

class TestRankCrops:
    def test_reference_field_top_four(self, sample_measurement):
        crops = get_crop_recommendations(sample_measurement, 7.9)
        assert [c.name for c in crops] == ["Cotton", "Wheat", "Maize", "Potato"]
        assert [c.score for c in crops] == [10, 9, 9, 9]
        assert all(c.suitability == Suitability.HIGHLY_RECOMMENDED for c in crops)

    def test_ties_keep_catalog_order(self, balanced_measurement):
        crops = get_crop_recommendations(balanced_measurement, 10.0)
        assert [(c.name, c.score) for c in crops] == [
            ("Wheat", 9), ("Maize", 9), ("Mustard", 9), ("Cotton", 8),
        ]

    def test_match_carries_catalog_fields(self, balanced_measurement):
        wheat = get_crop_recommendations(balanced_measurement, 10.0)[0]
        assert wheat.timing == "Oct-Nov | Mar-Apr"
        assert wheat.expected_yield == "18-22 quintals/acre"
        assert wheat.priority == Priority.HIGH

    def test_flood_irrigated_clay_favours_rice(self):
        m = _measurement(
            soil_type=SoilType.CLAY, irrigation=IrrigationMethod.FLOOD,
            nitrogen=300, phosphorus=40, potassium=300,
        )
        crops = get_crop_recommendations(m, 8.0)
        assert [(c.name, c.score) for c in crops] == [
            ("Rice", 10), ("Wheat", 9), ("Mustard", 9),
        ]

    def test_no_qualifying_crop_returns_empty(self):
        m = _measurement(
            soil_type=SoilType.PEATY, irrigation=IrrigationMethod.CENTER_PIVOT,
            ph_level=4.0, nitrogen=0, phosphorus=0, potassium=0,
        )
        assert get_crop_recommendations(m, 2.0) == []

    def test_all_results_meet_minimum_and_are_sorted(self):
        for soil in SoilType:
            for irrigation in IrrigationMethod:
                m = _measurement(soil_type=soil, irrigation=irrigation)
                crops = get_crop_recommendations(m, 8.0)
                assert len(crops) <= 4
                assert all(c.score >= 5 for c in crops)
                assert [c.score for c in crops] == sorted((c.score for c in crops), reverse=True)

    def test_suitable_label_below_seven(self):
        m = _measurement(
            soil_type=SoilType.CLAY, irrigation=IrrigationMethod.MANUAL,
            nitrogen=200, phosphorus=40, potassium=300,
        )
        crops = get_crop_recommendations(m, 8.0)
        # Wheat and Mustard: soil 3 + pH 2 + N/P/K 3 = 8; Rice: 3 + 2 + 2 = 7
        assert [(c.name, c.score, c.suitability) for c in crops][:2] == [
            ("Wheat", 8, Suitability.HIGHLY_RECOMMENDED),
            ("Mustard", 8, Suitability.HIGHLY_RECOMMENDED),
        ]
        settings = CropMatchSettings(highly_recommended_score=9)
        relabelled = get_crop_recommendations(m, 8.0, settings)
        assert all(c.suitability == Suitability.SUITABLE for c in relabelled)


class TestSettings:
    def test_top_n(self, sample_measurement):
        crops = get_crop_recommendations(sample_measurement, 7.9, CropMatchSettings(top_n=2))
        assert [c.name for c in crops] == ["Cotton", "Wheat"]

    def test_min_score(self, sample_measurement):
        crops = get_crop_recommendations(sample_measurement, 7.9, CropMatchSettings(min_score=10))
        assert [c.name for c in crops] == ["Cotton"]

    def test_custom_catalog(self):
        millet = _crop()
        m = _measurement(
            soil_type=SoilType.SANDY, irrigation=IrrigationMethod.MANUAL,
            nitrogen=100, phosphorus=10, potassium=100,
        )
        crops = rank_crops(m, catalog=(millet,) + CROP_CATALOG)
        assert crops[0].name == "Millet"
        assert crops[0].score == 10
