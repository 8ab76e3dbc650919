"""Shared fixtures for flightcheck tests.

"Today" is pinned to 13/10/2025 so date rules are deterministic.
"""

from datetime import date

import pytest

from flightcheck.core.clock import FixedClock
from flightcheck.validation.validator import BookingValidator

TODAY = date(2025, 10, 13)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def validator(fixed_clock: FixedClock) -> BookingValidator:
    """Validator with no committed booking and a fixed clock."""
    return BookingValidator(clock=fixed_clock)
