"""Core constants and enums."""

from enum import Enum
from typing import Any


class SeatingClass(str, Enum):
    """Cabin classes a booking may request."""

    economy = "economy"
    premium_economy = "premium-economy"
    business = "business"
    first = "first"

    @classmethod
    def from_token(cls, token: Any) -> "SeatingClass | None":
        """Look up a class by exact, case-sensitive token.

        Args:
            token: Raw seating class value from a booking

        Returns:
            Matching member, or None if the token is not allowed
        """
        if not isinstance(token, str):
            return None
        token = _SEATING_CLASS_ALIASES.get(token, token)
        try:
            return cls(token)
        except ValueError:
            return None


# Accepted spelling of premium-economy.
_SEATING_CLASS_ALIASES = {"premium economy": SeatingClass.premium_economy.value}


class AirportCode(str, Enum):
    """Airports served by the booking engine."""

    syd = "syd"
    mel = "mel"
    lax = "lax"
    cdg = "cdg"
    del_ = "del"
    pvg = "pvg"
    doh = "doh"

    @classmethod
    def from_token(cls, token: Any) -> "AirportCode | None":
        """Look up an airport by exact, case-sensitive token."""
        if not isinstance(token, str):
            return None
        try:
            return cls(token)
        except ValueError:
            return None


# Reference limits for passenger rules
MAX_PASSENGERS = 9
MAX_CHILDREN_PER_ADULT = 2
MAX_INFANTS_PER_ADULT = 1
