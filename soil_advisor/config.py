"""
Soil Advisor configuration.

Sources, lowest to highest precedence:
  1. ``config/default.toml``  (or the file passed with ``--config``)
  2. ``local.toml`` next to that file, if present
  3. ``.env`` at the project root, loaded into the process environment
  4. ``SOIL_ADVISOR_OUTPUT_DIR`` / ``SOIL_ADVISOR_LOG_LEVEL`` /
     ``SOIL_ADVISOR_DEBUG`` environment variables

``load_config()`` merges these into one frozen ``AppConfig``; commands read
settings from it rather than from the environment directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DataConfig(BaseModel):
    """Where measurement files are read from and reports are written to."""

    model_config = ConfigDict(frozen=True)

    input_dir: str = "data/input"
    output_dir: str = "data/outputs/analyses"


class AnalysisConfig(BaseModel):
    """Crop ranking thresholds (defaults match the published rule table)."""

    model_config = ConfigDict(frozen=True)

    top_n_crops: int = 4
    min_crop_score: int = 5
    highly_recommended_score: int = 7

    @field_validator("top_n_crops")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"top_n_crops must be >= 1, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_score_order(self) -> "AnalysisConfig":
        if not 0 <= self.min_crop_score <= self.highly_recommended_score:
            raise ValueError(
                "Crop scores must satisfy 0 <= min_crop_score <= "
                f"highly_recommended_score, got {self.min_crop_score} / "
                f"{self.highly_recommended_score}."
            )
        return self


class LoggingConfig(BaseModel):
    """Log level, optional log file and output format."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/soil_advisor.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {list(LOG_LEVELS)}, got '{v}'.")
        return level


class AppConfig(BaseModel):
    """Every setting a CLI command needs, built by ``load_config()``."""

    model_config = ConfigDict(frozen=True)

    data: DataConfig = DataConfig()
    analysis: AnalysisConfig = AnalysisConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loading ───────────────────────────────────────────────────────────────────


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


# env var -> (section or None for top level, key, parser)
ENV_OVERRIDES: dict[str, tuple[Optional[str], str, Callable[[str], Any]]] = {
    "SOIL_ADVISOR_OUTPUT_DIR": ("data", "output_dir", str),
    "SOIL_ADVISOR_LOG_LEVEL":  ("logging", "level", str),
    "SOIL_ADVISOR_DEBUG":      (None, "debug", _parse_bool),
}


def project_root() -> Path:
    """Return the nearest ancestor of this package holding ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here.parent


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Build the application config from TOML files and the environment.

    Args:
        config_path: TOML file to load. Defaults to
            ``<project root>/config/default.toml``.

    Returns:
        A validated ``AppConfig``.

    Raises:
        FileNotFoundError: If the TOML file does not exist.
        pydantic.ValidationError: If a merged value is invalid.
    """
    root = project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    path = Path(config_path) if config_path else root / "config" / "default.toml"
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Create config/default.toml or pass --config."
        )

    raw = _read_toml(path)
    local_path = path.parent / "local.toml"
    if local_path.exists():
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_apply_env_overrides(raw, os.environ))


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in, recursing into tables."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = _deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def _apply_env_overrides(raw: dict[str, Any], environ) -> dict[str, Any]:
    """Overlay the ``ENV_OVERRIDES`` variables that are set and non-empty."""
    result = dict(raw)
    for var, (section, key, parse) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if not value:
            continue
        if section is None:
            result[key] = parse(value)
        else:
            result[section] = {**result.get(section, {}), key: parse(value)}
    return result


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Validate the merged dict; ``[project] debug`` is the file-level switch."""
    debug = raw.get("debug", raw.get("project", {}).get("debug", False))
    return AppConfig(
        data=DataConfig(**raw.get("data", {})),
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=debug,
    )
