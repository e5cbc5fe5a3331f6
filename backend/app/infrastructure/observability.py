"""Structured Logging: one JSON object per line, keyed by CEP and city.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Only whitelisted request fields (cep, city, error_code, path, status_code,
      duration_ms) are lifted from `extra=`, so a stray attribute never leaks a secret
    - The WeatherAPI key is never a whitelisted field
    - LOG_FORMAT=text switches to a single-line human format for local runs

Design Decisions:
    - One root handler tagged _cep_weather: re-running the lifespan (tests, reloads)
      replaces it instead of duplicating every line
    - stdlib logging.Formatter subclass: uvicorn runs with log_config=None and
      access_log=False, so this formatter is the only output format for app and server
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("cep", "city", "error_code", "path", "status_code", "duration_ms")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_TAG = "_cep_weather"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as one JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler, replacing a previous one."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
