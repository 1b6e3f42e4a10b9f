"""
Logging setup for the ``soil-advisor`` CLI.

Library modules only ever do ``logger = logging.getLogger(__name__)``; the
CLI calls ``configure_logging(config.logging)`` once per command before any
measurement is read.

Handlers
--------
console : stderr, so ``analyze --json`` keeps stdout machine-readable.
file    : ``config.log_file`` when non-empty (parent dirs created).

With ``json_format = true`` both handlers write one object per line::

    {"ts": "2026-10-19T09:00:00Z", "level": "INFO",
     "logger": "soil_advisor.analysis", "msg": "Analyzed Plot 142 ..."}

Keys passed through ``extra=`` are copied into the object as-is.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from soil_advisor.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_BUILTIN_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonLineFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict = {
            "ts":     created.strftime(TIMESTAMP_FORMAT),
            "level":  record.levelname,
            "logger": record.name,
            "msg":    record.getMessage(),
        }
        entry.update(
            (key, val)
            for key, val in vars(record).items()
            if key not in _BUILTIN_RECORD_KEYS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def build_handlers(config: "LoggingConfig") -> list[logging.Handler]:
    """Create the console handler and, if configured, the file handler."""
    formatter: logging.Formatter = (
        JsonLineFormatter()
        if config.json_format
        else logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(config: "LoggingConfig") -> None:
    """Replace the root logger's handlers according to ``config``.

    Args:
        config: The ``[logging]`` section of ``AppConfig``.
    """
    logging.basicConfig(
        level=logging.getLevelName(config.level),
        handlers=build_handlers(config),
        force=True,
    )
