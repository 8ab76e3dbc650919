"""Configuration module for flightcheck."""

from flightcheck.config.loader import ConfigLoader
from flightcheck.config.models import (
    FlightCheckConfig,
    LoggingConfig,
    PassengerLimits,
    ValidatorConfig,
)

__all__ = [
    "ConfigLoader",
    "FlightCheckConfig",
    "LoggingConfig",
    "PassengerLimits",
    "ValidatorConfig",
]
