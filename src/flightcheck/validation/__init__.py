"""Booking validation for flightcheck"""

from flightcheck.validation.registry import RuleRegistry
from flightcheck.validation.rules import booking_rules
from flightcheck.validation.validator import BookingValidator

__all__ = ["BookingValidator", "RuleRegistry", "booking_rules"]
