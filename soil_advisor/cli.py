"""
Soil Advisor — CLI entry point.

Analysis commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs (measurement fields or input file).
  4. Score + recommend.
  5. Report result to stdout (or to report files for batches).

Install and run::

    pip install -e .
    soil-advisor --help
    soil-advisor validate-config
    soil-advisor analyze --land-area 5.2 --location "Plot 142" --soil-type Loamy \\
        --irrigation Drip --ph 6.5 --nitrogen 195 --phosphorus 41 \\
        --potassium 352 --organic-carbon 0.54 --zinc 0.44
    soil-advisor analyze-batch --file data/input/fields.csv
    soil-advisor soil-types
    soil-advisor crops-for-soil Clay
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="soil-advisor",
    help="Soil health scoring with fertilizer, pesticide and crop recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from soil_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from soil_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_measurements_or_exit(path: Path):
    """Parse a measurement file, exiting with code 1 on any error."""
    from soil_advisor.ingestion.measurement_io import load_measurements

    try:
        return load_measurements(path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


def _resolve_soil_type(soil_type: str):
    """Return the SoilType for ``soil_type``, warning and using Loamy if unknown."""
    from soil_advisor.scoring.ranges import FALLBACK_SOIL_TYPE
    from soil_advisor.taxonomy.soil_taxonomy import SoilType

    try:
        return SoilType(soil_type)
    except ValueError:
        typer.echo(
            f"[WARN] Unknown soil type '{soil_type}'; showing "
            f"{FALLBACK_SOIL_TYPE.value} values.",
            err=True,
        )
        return FALLBACK_SOIL_TYPE


def _print_analysis(analysis) -> None:
    """Print a human-readable analysis summary."""
    m = analysis.measurement
    c = analysis.components
    recs = analysis.recommendations

    typer.echo(f"Location:   {m.location}")
    typer.echo(f"Field:      {m.land_area} acres, {m.soil_type} soil, {m.irrigation} irrigation")
    typer.echo(f"Soil score: {analysis.health_score:.1f} / 10")
    typer.echo(
        f"  pH {c.ph:.1f} | N {c.nitrogen:.1f} | P {c.phosphorus:.1f} | "
        f"K {c.potassium:.1f} | OC {c.organic_carbon:.1f} | Zn {c.zinc:.1f}"
    )

    typer.echo("")
    typer.echo("Fertilizers:")
    for r in recs.fertilizers:
        typer.echo(f"  [{r.priority}] {r.name}: {r.application} ({r.frequency}) - {r.purpose}")

    typer.echo("")
    typer.echo("Pesticides:")
    for r in recs.pesticides:
        typer.echo(f"  [{r.priority}] {r.name}: {r.application} - {r.purpose}")

    typer.echo("")
    typer.echo("Recommended crops:")
    if not recs.crops:
        typer.echo("  (no crop cleared the minimum match score)")
    for rank, crop in enumerate(recs.crops, start=1):
        typer.echo(
            f"  {rank}. {crop.name} [{crop.suitability}, score {crop.score}] "
            f"{crop.timing}, {crop.expected_yield}"
        )


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Output dir:        {config.data.output_dir}")
    typer.echo(f"  Top-N crops:       {config.analysis.top_n_crops}")
    typer.echo(f"  Min crop score:    {config.analysis.min_crop_score}")
    typer.echo(f"  Highly rec. score: {config.analysis.highly_recommended_score}")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("analyze")
def analyze(
    land_area: Optional[float] = typer.Option(None, "--land-area", help="Land area in acres."),
    location: Optional[str] = typer.Option(None, "--location", help="Field location."),
    soil_type: Optional[str] = typer.Option(None, "--soil-type", help="Sandy, Clay, Loamy, Silty, Peaty or Chalky."),
    irrigation: Optional[str] = typer.Option(
        None, "--irrigation", help="Drip, Sprinkler, Flood, Center Pivot or Manual."
    ),
    ph_level: Optional[float] = typer.Option(None, "--ph", help="Soil pH (0-14)."),
    nitrogen: Optional[float] = typer.Option(None, "--nitrogen", help="Nitrogen, kg/ha."),
    phosphorus: Optional[float] = typer.Option(None, "--phosphorus", help="Phosphorus, kg/ha."),
    potassium: Optional[float] = typer.Option(None, "--potassium", help="Potassium, kg/ha."),
    organic_carbon: Optional[float] = typer.Option(None, "--organic-carbon", help="Organic carbon, %."),
    zinc: Optional[float] = typer.Option(None, "--zinc", help="Zinc, ppm."),
    input_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON or CSV file holding one measurement (field options are ignored).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result payload as JSON."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Score one soil measurement and print its recommendations."""
    from pydantic import ValidationError

    from soil_advisor.analysis import analyze_measurement, crop_settings_from_config
    from soil_advisor.models.measurement import SoilMeasurement

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if input_file:
        measurements = _load_measurements_or_exit(Path(input_file))
        if len(measurements) != 1:
            typer.echo(
                f"[ERROR] Expected exactly one measurement in {input_file}, "
                f"found {len(measurements)}. Use analyze-batch for multiple.",
                err=True,
            )
            raise typer.Exit(code=1)
        measurement = measurements[0]
    else:
        fields = {
            "land_area": land_area,
            "location": location,
            "soil_type": soil_type,
            "irrigation": irrigation,
            "ph_level": ph_level,
            "nitrogen": nitrogen,
            "phosphorus": phosphorus,
            "potassium": potassium,
            "organic_carbon": organic_carbon,
            "zinc": zinc,
        }
        missing = [name for name, value in fields.items() if value is None]
        if missing:
            typer.echo(f"[ERROR] Missing measurement fields: {', '.join(missing)}", err=True)
            raise typer.Exit(code=1)
        try:
            measurement = SoilMeasurement(**fields)
        except ValidationError as exc:
            typer.echo(f"[ERROR] Invalid measurement: {exc}", err=True)
            raise typer.Exit(code=1)

    analysis = analyze_measurement(
        measurement, crop_settings_from_config(config.analysis)
    )

    if as_json:
        typer.echo(json.dumps(analysis.to_payload(), indent=2))
    else:
        _print_analysis(analysis)


@app.command("analyze-batch")
def analyze_batch_cmd(
    input_file: str = typer.Option(
        ...,
        "--file",
        "-f",
        help="Measurements file (.csv with header row, or .json array).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Report directory. Defaults to config.data.output_dir.",
    ),
    label: Optional[str] = typer.Option(
        None,
        "--label",
        help="Label used in report filenames. Defaults to the input file stem.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Analyze every measurement in a file and write JSON + CSV reports."""
    from soil_advisor.analysis import analyze_batch, crop_settings_from_config
    from soil_advisor.recommendations.reporter import (
        write_analysis_csv,
        write_analysis_json,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    path = Path(input_file)
    typer.echo(f"Loading measurements from: {path}")
    measurements = _load_measurements_or_exit(path)
    if not measurements:
        typer.echo("[WARN] No measurements found; nothing to analyze.")
        return

    analyses = analyze_batch(measurements, crop_settings_from_config(config.analysis))

    out_dir = Path(output_dir or config.data.output_dir)
    report_label = label or path.stem
    json_path = write_analysis_json(analyses, out_dir, report_label)
    csv_path = write_analysis_csv(analyses, out_dir, report_label)

    typer.echo(f"  Analyzed: {len(analyses)} measurement(s)")
    typer.echo(f"  JSON:     {json_path}")
    typer.echo(f"  CSV:      {csv_path}")
    typer.echo("[OK] Batch analysis complete.")


@app.command("soil-types")
def soil_types() -> None:
    """List supported soil types."""
    from soil_advisor.taxonomy.soil_taxonomy import SOIL_TYPE_DESCRIPTIONS

    for soil, description in SOIL_TYPE_DESCRIPTIONS.items():
        typer.echo(f"  {soil.value:<8} {description}")


@app.command("irrigation-types")
def irrigation_types() -> None:
    """List supported irrigation methods."""
    from soil_advisor.taxonomy.soil_taxonomy import IRRIGATION_DESCRIPTIONS

    for method, description in IRRIGATION_DESCRIPTIONS.items():
        typer.echo(f"  {method.value:<13} {description}")


@app.command("fertilizer-reference")
def fertilizer_reference_cmd(
    soil_type: str = typer.Argument(..., help="Soil type, e.g. Loamy."),
) -> None:
    """Show target N/P/K bands for a soil type."""
    from soil_advisor.recommendations.reference import fertilizer_reference

    soil = _resolve_soil_type(soil_type)
    typer.echo(f"Nutrient targets for {soil.value} soil:")
    for nutrient, band in fertilizer_reference(soil).items():
        typer.echo(
            f"  {nutrient:<10} min {band['min']:g}  ideal {band['ideal']:g}  "
            f"max {band['max']:g} {band['unit']}"
        )


@app.command("crops-for-soil")
def crops_for_soil_cmd(
    soil_type: str = typer.Argument(..., help="Soil type, e.g. Clay."),
) -> None:
    """List catalog crops suited to a soil type."""
    from soil_advisor.recommendations.reference import crops_for_soil

    soil = _resolve_soil_type(soil_type)
    crops = crops_for_soil(soil)
    typer.echo(f"Crops suited to {soil.value} soil:")
    for crop in crops:
        typer.echo(f"  {crop.name:<8} {crop.timing}, {crop.expected_yield}")


if __name__ == "__main__":
    app()
