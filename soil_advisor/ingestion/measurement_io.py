"""
Import parsers for soil measurement files.

CSV format — comma delimited, with a header row.
Required columns:
  land_area, location, soil_type, irrigation, ph_level,
  nitrogen, phosphorus, potassium, organic_carbon, zinc

Extra columns are ignored.

Valid enum values:
  soil_type   → any SoilType.value         (e.g. "Sandy", "Loamy", "Chalky")
  irrigation  → any IrrigationMethod.value (e.g. "Drip", "Center Pivot")

JSON format — either a single measurement object or an array of objects with
the same keys as the CSV columns (numbers may be JSON numbers or strings).

Both parsers validate every record before returning any. If **any** record
fails, a single ``ValueError`` is raised listing the first 10 failures.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from soil_advisor.models.measurement import SoilMeasurement
from soil_advisor.taxonomy.soil_taxonomy import IrrigationMethod, SoilType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = frozenset({
    "land_area", "location", "soil_type", "irrigation", "ph_level",
    "nitrogen", "phosphorus", "potassium", "organic_carbon", "zinc",
})

_NUMERIC_COLUMNS = (
    "land_area", "ph_level", "nitrogen", "phosphorus",
    "potassium", "organic_carbon", "zinc",
)

_MAX_ERRORS_SHOWN = 10


def load_measurements(path: Path) -> list[SoilMeasurement]:
    """Load measurements from a ``.csv`` or ``.json`` file (by extension).

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On an unsupported extension or any invalid record.
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return parse_measurement_csv(path)
    if suffix == ".json":
        return parse_measurement_json(path)
    raise ValueError(f"Unsupported file type '{suffix}'. Use .csv or .json.")


def parse_measurement_csv(path: Path) -> list[SoilMeasurement]:
    """Parse a CSV file of soil measurements into validated models.

    Args:
        path: Path to the CSV file (must exist).

    Returns:
        List of validated :class:`SoilMeasurement` instances.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If required columns are missing or any row fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Measurement CSV file not found: {path}")

    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")

        actual_cols = {c.strip() for c in reader.fieldnames}
        missing = REQUIRED_COLUMNS - actual_cols
        if missing:
            raise ValueError(
                f"CSV missing required columns: {sorted(missing)}\n"
                f"Found columns: {sorted(actual_cols)}"
            )

        rows = [{(k or "").strip(): v for k, v in row.items()} for row in reader]

    if not rows:
        logger.warning("Measurement CSV is empty (header only): %s", path)
        return []

    measurements: list[SoilMeasurement] = []
    errors: list[tuple[str, str]] = []

    for i, row in enumerate(rows):
        label = f"Row {i + 2}"  # 1-based, skip header row
        try:
            measurements.append(_record_to_measurement(row))
        except (ValueError, ValidationError) as exc:
            errors.append((label, str(exc)))

    _raise_if_errors(errors, path)
    logger.info("Parsed %d measurements from %s", len(measurements), path.name)
    return measurements


def parse_measurement_json(path: Path) -> list[SoilMeasurement]:
    """Parse a JSON object or array of soil measurements.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON, a non-object record, or any record
            that fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Measurement JSON file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path.name}: {exc}") from exc

    records = raw if isinstance(raw, list) else [raw]

    measurements: list[SoilMeasurement] = []
    errors: list[tuple[str, str]] = []

    for i, record in enumerate(records):
        label = f"Record {i}"
        if not isinstance(record, dict):
            errors.append((label, f"expected an object, got {type(record).__name__}"))
            continue
        try:
            measurements.append(_record_to_measurement(record))
        except (ValueError, ValidationError) as exc:
            errors.append((label, str(exc)))

    _raise_if_errors(errors, path)
    logger.info("Parsed %d measurements from %s", len(measurements), path.name)
    return measurements


# ── Private helpers ────────────────────────────────────────────────────────────

def _record_to_measurement(record: dict[str, Any]) -> SoilMeasurement:
    """Convert a raw CSV/JSON record to a validated :class:`SoilMeasurement`.

    Raises:
        ValueError: On bad enum values, non-numeric fields, or empty fields.
        pydantic.ValidationError: On range or length violations.
    """
    numbers = {key: _parse_float(record, key) for key in _NUMERIC_COLUMNS}
    return SoilMeasurement(
        location=_req(record, "location"),
        soil_type=_parse_enum(SoilType, "soil_type", record),
        irrigation=_parse_enum(IrrigationMethod, "irrigation", record),
        **numbers,
    )


def _req(record: dict[str, Any], key: str) -> str:
    """Return a required string field, stripped; raise if empty."""
    v = str(record.get(key) or "").strip()
    if not v:
        raise ValueError(f"Required field '{key}' is empty.")
    return v


def _parse_float(record: dict[str, Any], key: str) -> float:
    """Parse a required numeric field with a descriptive error."""
    v = record.get(key)
    if isinstance(v, bool):
        raise ValueError(f"Field '{key}' must be a number, got {v!r}.")
    if isinstance(v, (int, float)):
        return float(v)
    raw = _req(record, key)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Field '{key}' must be a number, got '{raw}'.")


def _parse_enum(enum_cls, key: str, record: dict[str, Any]):
    """Parse an enum value from a record field with a descriptive error."""
    raw = _req(record, key)
    try:
        return enum_cls(raw)
    except ValueError:
        valid = [e.value for e in enum_cls]
        raise ValueError(f"Invalid {key} value '{raw}'. Valid values: {valid}")


def _raise_if_errors(errors: list[tuple[str, str]], path: Path) -> None:
    if not errors:
        return
    detail = "\n".join(f"  {label}: {msg}" for label, msg in errors[:_MAX_ERRORS_SHOWN])
    hidden = len(errors) - _MAX_ERRORS_SHOWN
    suffix = f"\n  … and {hidden} more" if hidden > 0 else ""
    raise ValueError(
        f"{len(errors)} record(s) failed validation in {path.name}:\n{detail}{suffix}"
    )
