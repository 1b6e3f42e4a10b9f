"""
Analysis report writer: JSON and CSV output for batches of soil analyses.

All functions are pure I/O — they consume in-memory ``SoilAnalysis`` lists
and write human-readable + machine-readable files.

Output files (written by ``soil-advisor analyze-batch``)
--------------------------------------------------------
  data/outputs/analyses/
    soil_analysis_{label}_{date}.json  -- full payload per measurement
    soil_analysis_{label}_{date}.csv   -- one summary row per measurement
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from soil_advisor.analysis import SoilAnalysis

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"

CSV_FIELDNAMES = [
    "location", "soil_type", "irrigation", "land_area", "soil_score",
    "fertilizers", "pesticides", "recommended_crops", "top_crop",
]


def analysis_record(analysis: SoilAnalysis) -> dict[str, Any]:
    """Full JSON-compatible record: measurement, sub-scores and payload."""
    return {
        "measurement":      analysis.measurement.model_dump(mode="json"),
        "score_components": analysis.components.as_dict(),
        **analysis.to_payload(),
    }


def write_analysis_json(
    analyses:   list[SoilAnalysis],
    output_dir: Path,
    label:      str,
    run_date:   date | None = None,
) -> Path:
    """Write all analyses to a structured JSON file.

    Args:
        analyses:   Results from ``analyze_batch()``.
        output_dir: Target directory (created if missing).
        label:      Batch label used in the filename and metadata.
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"soil_analysis_{label}_{run_date}.json"

    payload: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "label":          label,
        "generated_at":   run_date.isoformat(),
        "count":          len(analyses),
        "analyses":       [analysis_record(a) for a in analyses],
    }

    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Analysis JSON written: %s (%d analyses)", json_path, len(analyses))
    return json_path


def write_analysis_csv(
    analyses:   list[SoilAnalysis],
    output_dir: Path,
    label:      str,
    run_date:   date | None = None,
) -> Path:
    """Write one flat summary row per analysis to a CSV file.

    List columns hold product / crop names joined with ``"; "``.
    ``top_crop`` is empty when no crop qualified.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"soil_analysis_{label}_{run_date}.csv"

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()
        for a in analyses:
            m = a.measurement
            recs = a.recommendations
            writer.writerow(
                {
                    "location":          m.location,
                    "soil_type":         str(m.soil_type),
                    "irrigation":        str(m.irrigation),
                    "land_area":         m.land_area,
                    "soil_score":        a.health_score,
                    "fertilizers":       "; ".join(r.name for r in recs.fertilizers),
                    "pesticides":        "; ".join(r.name for r in recs.pesticides),
                    "recommended_crops": "; ".join(c.name for c in recs.crops),
                    "top_crop":          recs.crops[0].name if recs.crops else "",
                }
            )

    logger.info("Analysis CSV written: %s (%d rows)", csv_path, len(analyses))
    return csv_path
