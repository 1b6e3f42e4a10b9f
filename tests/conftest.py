"""
Shared pytest fixtures for the Soil Advisor test suite.

Provides:
  - ``sample_measurement``: the reference Loamy/Drip field (N and zinc
    deficient) used throughout the docs.
  - ``balanced_measurement``: a Loamy field sitting exactly on every ideal,
    scoring 10.0 with no nutrient deficit.
  - ``restore_root_logger``: resets root logger handlers after tests that
    call ``configure_logging()``.
"""

from __future__ import annotations

import logging

import pytest

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.taxonomy.soil_taxonomy import IrrigationMethod, SoilType


@pytest.fixture
def sample_measurement() -> SoilMeasurement:
    """A valid ``SoilMeasurement`` with a nitrogen and zinc deficit."""
    return SoilMeasurement(
        land_area=5.2,
        location="Sector 7, Plot 142, New Delhi",
        soil_type=SoilType.LOAMY,
        irrigation=IrrigationMethod.DRIP,
        ph_level=6.5,
        nitrogen=195,
        phosphorus=41,
        potassium=352,
        organic_carbon=0.54,
        zinc=0.44,
    )


@pytest.fixture
def balanced_measurement() -> SoilMeasurement:
    """A Loamy ``SoilMeasurement`` on every ideal value."""
    return SoilMeasurement(
        land_area=2.5,
        location="North Field",
        soil_type=SoilType.LOAMY,
        irrigation=IrrigationMethod.DRIP,
        ph_level=6.5,
        nitrogen=275,
        phosphorus=45,
        potassium=350,
        organic_carbon=1.0,
        zinc=1.0,
    )


@pytest.fixture
def restore_root_logger():
    """Undo ``configure_logging()`` changes to the root logger after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
