"""
Logging configuration.

- console: human-readable lines (default)
- json: one JSON object per line, for log aggregation

Controlled by the LOG_FORMAT and LOG_LEVEL settings.
"""

import json
import logging
import logging.config
from datetime import UTC, datetime

from company_api.config import Settings


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def get_logging_config(settings: Settings) -> dict:
    """Build a ``logging.config.dictConfig`` mapping for the settings."""
    if settings.log_format == "json":
        formatter = {"()": "company_api.logging_config.JsonFormatter"}
    else:
        formatter = {"format": "[{asctime}] {levelname} {name} {message}", "style": "{"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": settings.log_level},
            "company_api": {"handlers": ["console"], "level": settings.log_level, "propagate": False},
            # SQL echo only when debugging
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "INFO" if settings.log_level == "DEBUG" else "WARNING",
                "propagate": False,
            },
        },
    }


def configure_logging(settings: Settings) -> None:
    logging.config.dictConfig(get_logging_config(settings))
