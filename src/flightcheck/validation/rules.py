"""Booking business rules.

Each rule is a pure predicate over a RuleContext. Registration order is the
order violations are reported in.
"""

from flightcheck.core.constants import AirportCode, SeatingClass
from flightcheck.core.types import RuleContext
from flightcheck.validation.registry import RuleRegistry

booking_rules = RuleRegistry()


@booking_rules.register("passenger_total")
def passenger_total(ctx: RuleContext) -> bool:
    """No negative children or infants, and 1..max_total passengers overall."""
    c = ctx.candidate
    if c.child_count < 0 or c.infant_count < 0:
        return False
    return 1 <= c.total_passengers <= ctx.limits.max_total


@booking_rules.register("child_seating")
def child_seating(ctx: RuleContext) -> bool:
    """Children may not sit in emergency rows or first class."""
    c = ctx.candidate
    if c.child_count > 0:
        return not c.emergency_row_seating and c.seating_class != SeatingClass.first
    return True


@booking_rules.register("infant_seating")
def infant_seating(ctx: RuleContext) -> bool:
    """Infants may not sit in emergency rows or business class."""
    c = ctx.candidate
    if c.infant_count > 0:
        return not c.emergency_row_seating and c.seating_class != SeatingClass.business
    return True


@booking_rules.register("child_ratio")
def child_ratio(ctx: RuleContext) -> bool:
    """Children need at least one adult, and at most max_children_per_adult each."""
    c = ctx.candidate
    if c.child_count > 0:
        return (
            c.adult_count >= 1
            and c.child_count <= ctx.limits.max_children_per_adult * c.adult_count
        )
    return True


@booking_rules.register("infant_ratio")
def infant_ratio(ctx: RuleContext) -> bool:
    """Infants need at least one adult, and at most max_infants_per_adult each."""
    c = ctx.candidate
    if c.infant_count > 0:
        return (
            c.adult_count >= 1
            and c.infant_count <= ctx.limits.max_infants_per_adult * c.adult_count
        )
    return True


@booking_rules.register("departure_not_past")
def departure_not_past(ctx: RuleContext) -> bool:
    """Departure may be today but not earlier."""
    if ctx.departure is None:
        # Reported by valid_dates
        return True
    return ctx.departure.to_date() >= ctx.today


@booking_rules.register("valid_dates")
def valid_dates(ctx: RuleContext) -> bool:
    """Both dates are strict DD/MM/YYYY and real calendar dates."""
    return ctx.departure is not None and ctx.return_ is not None


@booking_rules.register("return_after_departure")
def return_after_departure(ctx: RuleContext) -> bool:
    """Return may be the same day as departure but not before it."""
    if ctx.departure is None or ctx.return_ is None:
        return True
    return ctx.return_ >= ctx.departure


@booking_rules.register("seating_class")
def seating_class(ctx: RuleContext) -> bool:
    """Class is one of the allowed cabins."""
    return SeatingClass.from_token(ctx.candidate.seating_class) is not None


@booking_rules.register("emergency_row_economy")
def emergency_row_economy(ctx: RuleContext) -> bool:
    """Only economy offers emergency row seating."""
    c = ctx.candidate
    if c.emergency_row_seating:
        return SeatingClass.from_token(c.seating_class) is SeatingClass.economy
    return True


@booking_rules.register("airports")
def airports(ctx: RuleContext) -> bool:
    """Both airports are served and they differ."""
    origin = AirportCode.from_token(ctx.candidate.departure_airport)
    destination = AirportCode.from_token(ctx.candidate.destination_airport)
    if origin is None or destination is None:
        return False
    return origin is not destination
