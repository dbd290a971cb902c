"""
Logging Configuration

Provides:
- JsonFormatter: one JSON object per record, for CI log collectors
- setup_logging: YAML dictConfig loader with ${VAR} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "logging.yml"

# Anything on a record beyond these came in through `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    Renders each record as a single JSON line for CI log collectors.

    Keys: _time (UTC, millisecond precision), level, logger, message, then
    extras such as `image` or `container`. `exception` and `stack` are added
    when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "_time": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(config_path: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Load the YAML config, substitute environment variables, and initialize logging.

    *level* overrides LOG_LEVEL from the environment.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    resolved_level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()

    if not path.is_file():
        logging.basicConfig(level=resolved_level)
        return

    # Supports ${LOG_LEVEL} and ${LOG_FORMATTER}.
    template = string.Template(path.read_text(encoding="utf-8"))
    mapping = os.environ.copy()
    mapping["LOG_LEVEL"] = resolved_level
    mapping.setdefault("LOG_FORMATTER", "plain")

    config = yaml.safe_load(template.safe_substitute(mapping))
    logging.config.dictConfig(config)
