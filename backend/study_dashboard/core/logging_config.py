"""
Central logging configuration.

Goals:
- One shared logging setup for the API process and the client.
- JSON logs to stdout for easy aggregation.
- Correlate logs with request_id / study_token.

Prototype-friendly (no external deps).
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.config import dictConfig

from study_dashboard.core.request_context import get_context

# Attributes every LogRecord carries; anything else came in via `extra=`.
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def _jsonable(value):
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Include contextvars (request/study token)
        base.update(get_context())

        for k, v in record.__dict__.items():
            if k in _RECORD_ATTRS or k.startswith("_") or k in base:
                continue
            base[k] = _jsonable(v)

        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False)


def configure_logging() -> None:
    """
    Call once at process startup.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": "study_dashboard.core.logging_config.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            # Uvicorn loggers
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
            # Outbound HTTP (dashboard client)
            "httpx": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    }

    dictConfig(logging_config)
