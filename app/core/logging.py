"""
Logging configuration module.

This module provides structured logging configuration with support for:
- Console logging (development)
- File logging with rotation (production)
- JSON logging (production, for log aggregation)
- Request correlation ids on every record
- Separate error log file
"""

import logging
import logging.config
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from app.core.config import Settings, get_settings

# Set by RequestIDMiddleware for the duration of a request
correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure application logging based on environment settings.

    Call this function at application startup, before any logging occurs.

    Args:
        settings: Settings to configure from; defaults to the process settings
    """
    settings = settings or get_settings()

    if settings.log_file_enabled:
        log_dir = Path(settings.log_file_path).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config(settings))

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}, "
        f"file_enabled={settings.log_file_enabled}"
    )


def get_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "detailed"

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "[%(correlation_id)s] - %(funcName)s() - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s %(correlation_id)s "
                    "%(funcName)s %(message)s"
                ),
            },
        },
        "filters": {
            "correlation_id": {
                "()": CorrelationIdFilter,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stdout,
                "filters": ["correlation_id"],
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
        "loggers": {
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",  # Set to INFO to see SQL queries
                "handlers": ["console"],
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
            "app": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    if settings.log_file_enabled:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.log_level,
            "formatter": formatter,
            "filename": settings.log_file_path,
            "maxBytes": settings.log_file_max_bytes,
            "backupCount": settings.log_file_backup_count,
            "encoding": "utf-8",
            "filters": ["correlation_id"],
        }

        config["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": formatter,
            "filename": str(Path(settings.log_file_path).parent / "error.log"),
            "maxBytes": settings.log_file_max_bytes,
            "backupCount": settings.log_file_backup_count,
            "encoding": "utf-8",
            "filters": ["correlation_id"],
        }

        config["root"]["handlers"].extend(["file", "error_file"])
        config["loggers"]["app"]["handlers"].extend(["file", "error_file"])

    return config


class CorrelationIdFilter(logging.Filter):
    """
    Logging filter to add correlation_id to log records.

    The correlation_id (request_id) is stored in a context variable by
    RequestIDMiddleware. Outside a request, 'no-request-id' is used.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id_ctx.get() or "no-request-id"
        return True
