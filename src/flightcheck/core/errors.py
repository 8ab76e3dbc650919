"""Core flightcheck errors.

Rejected bookings are never errors; these cover misuse and bad configuration.
"""


class FlightCheckError(Exception):
    """Base class for all flightcheck errors."""

    pass


class ConfigError(FlightCheckError):
    """Raised when configuration is invalid."""


class RuleRegistryError(FlightCheckError):
    """Raised when rule registry operations fail."""

    pass
