"""Structured logging configuration for flightcheck."""

import logging
import logging.config
from typing import Any

from flightcheck.config.models import LoggingConfig


def setup_logging(level: str = "INFO", json_log_file: str | None = None) -> None:
    """
    Configure structured logging for flightcheck.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_log_file: If set, also write JSON records to this rotating file
    """
    level = level.upper()
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "flightcheck": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if json_log_file is not None:
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": json_log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["flightcheck"]["handlers"].append("file")

    logging.config.dictConfig(config)


def setup_logging_from_config(config: LoggingConfig) -> None:
    """Configure logging from a LoggingConfig section."""
    setup_logging(level=config.level, json_log_file=config.json_log_file)


class _MergingAdapter(logging.LoggerAdapter):
    """LoggerAdapter whose bound fields combine with call-site ``extra``."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


class ContextLogger:
    """Module logger that hands out adapters bound to per-record fields.

    The validator binds ``rule_name`` so every record about one rule
    carries it without repeating ``extra=`` at each call.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> logging.LoggerAdapter:
        """Bind fields to every record logged through the returned adapter.

        Fields passed as ``extra`` at the call site win over bound ones.
        """
        return _MergingAdapter(self.logger, context)
