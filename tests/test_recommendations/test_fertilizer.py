"""
Tests for soil_advisor/recommendations/fertilizer.py.

What we test
------------
  - Each N/P/K deficit below the soil minimum adds its product, sized from
    the gap to the ideal value.
  - Values at or above the minimum add nothing.
  - Low zinc adds Zinc Sulphate at 25 kg/acre.
  - No deficiency at all yields one Balanced NPK maintenance entry.
  - Quantities round half-up.
  - Order is N, P, K, zinc.
"""

from __future__ import annotations

import pytest

from soil_advisor.models.measurement import LAND_AREA_MAX_ACRES, SoilMeasurement
from soil_advisor.recommendations.fertilizer import get_fertilizer_recommendations
from soil_advisor.taxonomy.soil_taxonomy import IrrigationMethod, Priority, SoilType


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


def _names(recs) -> list[str]:
    return [r.name for r in recs]


class TestNutrientDeficits:
    def test_reference_field(self, sample_measurement):
        recs = get_fertilizer_recommendations(sample_measurement, 7.9)
        assert _names(recs) == ["Urea (46-0-0)", "Zinc Sulphate"]

        urea, zinc = recs
        # (275 - 195) * 2.17 * 5.2 = 902.72 -> 903
        assert urea.application == "903 kg/total"
        assert urea.frequency == "Before sowing & 30 days after"
        assert urea.purpose == "Nitrogen supplementation"
        assert urea.priority == Priority.HIGH
        # 25 * 5.2 = 130
        assert zinc.application == "130 kg/total"
        assert zinc.priority == Priority.MEDIUM

    def test_phosphorus_deficit_adds_dap(self):
        recs = get_fertilizer_recommendations(_measurement(phosphorus=30), 8.0)
        assert _names(recs) == ["DAP (18-46-0)"]
        # (45 - 30) * 4.35 * 1 = 65.25 -> 65
        assert recs[0].application == "65 kg/total"
        assert recs[0].frequency == "At the time of sowing"
        assert recs[0].priority == Priority.HIGH

    def test_potassium_deficit_adds_potash(self):
        recs = get_fertilizer_recommendations(_measurement(potassium=250, land_area=2.0), 8.0)
        assert _names(recs) == ["Muriate of Potash (0-0-60)"]
        # (350 - 250) * 1.67 * 2 = 334
        assert recs[0].application == "334 kg/total"
        assert recs[0].priority == Priority.MEDIUM

    def test_value_at_minimum_is_not_deficient(self):
        recs = get_fertilizer_recommendations(_measurement(nitrogen=250), 9.0)
        assert "Urea (46-0-0)" not in _names(recs)

    def test_excess_is_not_treated(self):
        recs = get_fertilizer_recommendations(_measurement(nitrogen=900), 8.0)
        assert _names(recs) == ["Balanced NPK Fertilizer"]

    def test_order_is_n_p_k_zinc(self):
        m = _measurement(
            soil_type=SoilType.SANDY, nitrogen=100, phosphorus=10,
            potassium=100, zinc=0.1,
        )
        recs = get_fertilizer_recommendations(m, 3.0)
        assert _names(recs) == [
            "Urea (46-0-0)",
            "DAP (18-46-0)",
            "Muriate of Potash (0-0-60)",
            "Zinc Sulphate",
        ]

    def test_soil_type_sets_the_minimum(self):
        # Phosphorus 42 clears the Loamy minimum (40) but not the Chalky one (45)
        loamy = get_fertilizer_recommendations(_measurement(phosphorus=42), 9.0)
        chalky = get_fertilizer_recommendations(
            _measurement(soil_type=SoilType.CHALKY, phosphorus=42), 9.0
        )
        assert "DAP (18-46-0)" not in _names(loamy)
        assert "DAP (18-46-0)" in _names(chalky)

    def test_unknown_soil_type_uses_loamy_ranges(self, sample_measurement):
        unknown = SoilMeasurement.model_construct(
            **{**sample_measurement.model_dump(), "soil_type": "Volcanic"}
        )
        recs = get_fertilizer_recommendations(unknown, 7.9)
        assert recs[0].name == "Urea (46-0-0)"
        assert recs[0].application == "903 kg/total"


class TestZinc:
    def test_threshold_is_exclusive(self):
        recs = get_fertilizer_recommendations(_measurement(zinc=0.6), 10.0)
        assert "Zinc Sulphate" not in _names(recs)

    def test_half_acre_rounds_up(self):
        recs = get_fertilizer_recommendations(_measurement(zinc=0.1, land_area=0.5), 9.0)
        # 25 * 0.5 = 12.5 -> 13
        assert recs[0].application == "13 kg/total"


class TestMaintenanceFallback:
    def test_balanced_field_gets_maintenance_dose(self, balanced_measurement):
        recs = get_fertilizer_recommendations(balanced_measurement, 10.0)
        assert len(recs) == 1
        rec = recs[0]
        assert rec.name == "Balanced NPK Fertilizer"
        # 100 * 2.5 = 250
        assert rec.application == "250 kg/total"
        assert rec.frequency == "Maintenance application"
        assert rec.purpose == "General soil health"
        assert rec.priority == Priority.LOW

    def test_list_is_never_empty(self):
        for n in (0, 250, 275, 500):
            for zinc in (0.0, 0.6, 3.0):
                recs = get_fertilizer_recommendations(_measurement(nitrogen=n, zinc=zinc), 5.0)
                assert recs


class TestLandAreaLimits:
    def test_largest_valid_field_is_dosed(self):
        m = _measurement(land_area=LAND_AREA_MAX_ACRES, zinc=0.1)
        recs = get_fertilizer_recommendations(m, 9.0)
        assert recs[0].application == "25000000 kg/total"

    def test_overflowing_dose_raises_value_error(self, sample_measurement):
        # Bypasses validation: 25 * 1e308 overflows to infinity
        unchecked = SoilMeasurement.model_construct(
            **{**sample_measurement.model_dump(), "land_area": 1e308}
        )
        with pytest.raises(ValueError, match="non-finite"):
            get_fertilizer_recommendations(unchecked, 7.9)
