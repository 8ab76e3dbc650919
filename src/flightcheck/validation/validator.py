"""Booking validator: checks candidates against the rules and commits accepted ones."""

import logging
from datetime import date, datetime

from flightcheck.config.models import ValidatorConfig
from flightcheck.core.clock import Clock, SystemClock
from flightcheck.core.dates import CalendarDate, parse_date
from flightcheck.core.types import BookingRequest, BookingState, RuleContext, SubmitResult
from flightcheck.observability.logging import ContextLogger
from flightcheck.validation.registry import RuleRegistry
from flightcheck.validation.rules import booking_rules

logger = logging.getLogger(__name__)
_rule_logger = ContextLogger(__name__)


def _parsed(text: object) -> CalendarDate | None:
    result = parse_date(text)
    return result if isinstance(result, CalendarDate) else None


class BookingValidator:
    """
    Gatekeeper for the current booking.

    Holds at most one committed BookingState. A candidate replaces it only
    when every rule passes; otherwise the state is left exactly as it was.

    Not safe for concurrent submit() calls on one instance; callers serialize.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        config: ValidatorConfig | None = None,
        rules: RuleRegistry | None = None,
    ):
        """
        Initialize validator.

        Args:
            clock: Zero-argument callable returning today's date.
                Defaults to a SystemClock in config.timezone.
            config: Validator configuration (passenger limits, timezone)
            rules: Rule registry to evaluate. Defaults to the booking rules.
        """
        self.config = config or ValidatorConfig()
        self.clock = clock if clock is not None else SystemClock(self.config.timezone)
        self.rules = rules if rules is not None else booking_rules
        self._state: BookingState | None = None

    @property
    def state(self) -> BookingState | None:
        """The last accepted booking, or None before the first acceptance."""
        return self._state

    def _today(self) -> date:
        """Read the clock once and reduce its value to a calendar date.

        Raises:
            TypeError: If the clock returns something other than a date
        """
        # Clock failures propagate; there is no "today" to validate against.
        today = self.clock()
        if isinstance(today, datetime):
            return today.date()
        if not isinstance(today, date):
            raise TypeError(f"Clock returned {type(today).__name__}, expected date")
        return today

    def check(self, candidate: BookingRequest) -> SubmitResult:
        """
        Evaluate every rule against a candidate without committing it.

        Args:
            candidate: Booking request to validate

        Returns:
            SubmitResult naming every failed rule
        """
        ctx = RuleContext(
            candidate=candidate,
            today=self._today(),
            departure=_parsed(candidate.departure_date),
            return_=_parsed(candidate.return_date),
            limits=self.config.limits,
        )

        violations = []
        for name, rule in self.rules:
            rule_log = _rule_logger.with_context(rule_name=name)
            try:
                passed = bool(rule(ctx))
            except (TypeError, ValueError, AttributeError) as e:
                # Malformed field values fail the rule like any other violation
                rule_log.debug(f"Rule '{name}' could not evaluate candidate: {e}")
                passed = False
            if not passed:
                rule_log.debug(f"Rule '{name}' failed")
                violations.append(name)

        return SubmitResult(accepted=not violations, violations=tuple(violations))

    def submit(self, candidate: BookingRequest) -> SubmitResult:
        """
        Validate a candidate and commit it if every rule passes.

        Args:
            candidate: Booking request to validate

        Returns:
            SubmitResult; state is replaced if and only if accepted is True
        """
        result = self.check(candidate)

        if not result.accepted:
            logger.info(
                f"Booking rejected: {', '.join(result.violations)}",
                extra={"violations": list(result.violations)},
            )
            return result

        # Single assignment of a new immutable value; no partial state is observable.
        self._state = BookingState.from_candidate(candidate)
        logger.info(
            f"Booking accepted: {candidate.departure_airport} -> "
            f"{candidate.destination_airport} on {candidate.departure_date}",
            extra={
                "departure_airport": candidate.departure_airport,
                "destination_airport": candidate.destination_airport,
                "passengers": candidate.total_passengers,
            },
        )
        return result
