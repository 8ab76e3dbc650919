"""Strict calendar date parsing.

Booking dates travel as ``DD/MM/YYYY`` text. Parsing is strict: the text must
match that literal layout exactly and name a real Gregorian date. Nothing rolls
over, so ``29/02/2026`` is rejected rather than read as 1 March.

Usage:
    from flightcheck.core.dates import ParseError, parse_date

    result = parse_date("29/02/2024")
    if isinstance(result, ParseError):
        ...
"""

from dataclasses import dataclass
from datetime import date

DATE_FORMAT = "DD/MM/YYYY"

_DIGIT_POSITIONS = (0, 1, 3, 4, 6, 7, 8, 9)
_SEPARATOR_POSITIONS = (2, 5)
_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated (year, month, day) triple."""

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)


@dataclass(frozen=True)
class ParseError:
    """Why a piece of text is not a valid booking date."""

    text: object
    reason: str


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def parse_date(text: object) -> CalendarDate | ParseError:
    """Parse ``DD/MM/YYYY`` text into a calendar date.

    Args:
        text: Candidate date text

    Returns:
        CalendarDate on success, ParseError describing the first problem otherwise
    """
    if not isinstance(text, str):
        return ParseError(text, f"expected text, got {type(text).__name__}")
    if len(text) != len(DATE_FORMAT):
        return ParseError(text, f"expected {DATE_FORMAT}")
    if any(text[i] != "/" for i in _SEPARATOR_POSITIONS):
        return ParseError(text, f"expected {DATE_FORMAT}")
    # str.isdigit() also accepts non-ASCII digits, so check membership instead
    if any(text[i] not in _ASCII_DIGITS for i in _DIGIT_POSITIONS):
        return ParseError(text, f"expected {DATE_FORMAT}")

    day, month, year = int(text[0:2]), int(text[3:5]), int(text[6:10])

    if year < 1:
        return ParseError(text, f"year out of range: {year}")
    if not 1 <= month <= 12:
        return ParseError(text, f"month out of range: {month}")
    if not 1 <= day <= days_in_month(year, month):
        return ParseError(text, f"day out of range for {month:02d}/{year:04d}: {day}")

    return CalendarDate(year, month, day)


def format_date(value: CalendarDate) -> str:
    """Render a calendar date back to ``DD/MM/YYYY``."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
