"""Logging setup for applications embedding the AccuWeather client."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import sanitize_for_logging, sanitize_text

LOGGER_NAME = "accuweather_client"

# Attributes the client attaches through ``extra=`` on request log records.
REQUEST_FIELDS = ("endpoint", "url", "status_code", "error_type")


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record, with request fields lifted to the top level.

    Every string that leaves the formatter goes through redaction, so an
    ``apikey`` query parameter never reaches the console.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        for field in REQUEST_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                event[field] = sanitize_for_logging(value)
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def request_extra(endpoint: str, url: str, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for a log record about one API request."""
    return {"endpoint": endpoint, "url": sanitize_text(url), **fields}


def get_logger() -> logging.Logger:
    """Return the package logger without touching its handlers."""
    return logging.getLogger(LOGGER_NAME)


def setup_logger(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """Attach a JSON console handler to ``name`` once and return the logger."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
