"""Core type definitions for booking validation."""

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any

from flightcheck.config.models import PassengerLimits
from flightcheck.core.dates import CalendarDate


@dataclass(frozen=True)
class BookingRequest:
    """Fields shared by candidates and committed state."""

    departure_date: str
    departure_airport: str
    emergency_row_seating: bool
    return_date: str
    destination_airport: str
    seating_class: str
    adult_count: int
    child_count: int
    infant_count: int

    @property
    def total_passengers(self) -> int:
        return self.adult_count + self.child_count + self.infant_count

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BookingCandidate(BookingRequest):
    """A booking request submitted for validation. Not validated on construction."""


@dataclass(frozen=True)
class BookingState(BookingRequest):
    """The last accepted booking request."""

    @classmethod
    def from_candidate(cls, candidate: BookingRequest) -> "BookingState":
        """Copy every field of an accepted candidate into a new state value."""
        return cls(**{f.name: getattr(candidate, f.name) for f in fields(BookingRequest)})


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule predicate may look at for one evaluation.

    Dates are None when the corresponding text did not parse.
    """

    candidate: BookingRequest
    today: date
    departure: CalendarDate | None
    return_: CalendarDate | None
    limits: PassengerLimits


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of validating a candidate.

    ``violations`` lists the names of failed rules in evaluation order.
    """

    accepted: bool
    violations: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.accepted
