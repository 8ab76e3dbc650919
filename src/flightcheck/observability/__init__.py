"""Observability module for flightcheck."""

from flightcheck.observability.logging import (
    ContextLogger,
    setup_logging,
    setup_logging_from_config,
)

__all__ = ["ContextLogger", "setup_logging", "setup_logging_from_config"]
