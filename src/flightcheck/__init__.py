"""flightcheck - flight booking request validation.

Validates a candidate booking against the booking rules and, only when every
rule passes, commits it as the current booking.

Quick start:
    from datetime import date

    from flightcheck import BookingCandidate, BookingValidator, FixedClock

    validator = BookingValidator(clock=FixedClock(date(2025, 10, 13)))
    result = validator.submit(
        BookingCandidate(
            departure_date="14/10/2025",
            departure_airport="mel",
            emergency_row_seating=False,
            return_date="20/10/2025",
            destination_airport="pvg",
            seating_class="economy",
            adult_count=1,
            child_count=0,
            infant_count=0,
        )
    )
    assert result.accepted
"""

from flightcheck.__version__ import __version__

# High-level API
from flightcheck.config import ConfigLoader, FlightCheckConfig, ValidatorConfig
from flightcheck.core.clock import Clock, FixedClock, SystemClock
from flightcheck.core.constants import AirportCode, SeatingClass
from flightcheck.core.dates import CalendarDate, ParseError, parse_date

# Errors
from flightcheck.core.errors import ConfigError, FlightCheckError, RuleRegistryError
from flightcheck.core.types import BookingCandidate, BookingState, SubmitResult
from flightcheck.validation import BookingValidator, RuleRegistry, booking_rules

__all__ = [
    # Version info
    "__version__",
    # High-level API
    "BookingValidator",
    "BookingCandidate",
    "BookingState",
    "SubmitResult",
    "Clock",
    "SystemClock",
    "FixedClock",
    "SeatingClass",
    "AirportCode",
    "CalendarDate",
    "ParseError",
    "parse_date",
    "RuleRegistry",
    "booking_rules",
    # Configuration
    "ConfigLoader",
    "FlightCheckConfig",
    "ValidatorConfig",
    # Errors
    "FlightCheckError",
    "ConfigError",
    "RuleRegistryError",
]
