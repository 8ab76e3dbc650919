"""Core domain types and infrastructure."""

from flightcheck.core.clock import Clock, FixedClock, SystemClock
from flightcheck.core.constants import AirportCode, SeatingClass
from flightcheck.core.dates import CalendarDate, ParseError, format_date, parse_date
from flightcheck.core.errors import ConfigError, FlightCheckError, RuleRegistryError

__all__ = [
    "AirportCode",
    "SeatingClass",
    "CalendarDate",
    "ParseError",
    "parse_date",
    "format_date",
    "Clock",
    "SystemClock",
    "FixedClock",
    "FlightCheckError",
    "ConfigError",
    "RuleRegistryError",
]
