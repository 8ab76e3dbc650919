"""Tests for strict DD/MM/YYYY date parsing."""

from datetime import date

import pytest

from flightcheck.core.dates import (
    CalendarDate,
    ParseError,
    days_in_month,
    format_date,
    is_leap_year,
    parse_date,
)


def test_parse_valid_date():
    """Test a well-formed date parses into its parts."""
    # Act
    result = parse_date("14/10/2025")

    # Assert
    assert result == CalendarDate(2025, 10, 14)
    assert result.to_date() == date(2025, 10, 14)


def test_leap_day_in_leap_year():
    """Test 29 February parses in a leap year."""
    assert parse_date("29/02/2024") == CalendarDate(2024, 2, 29)


def test_leap_day_in_common_year_rejected():
    """Test 29 February is rejected, not rolled over, in a common year."""
    # Act
    result = parse_date("29/02/2026")

    # Assert
    assert isinstance(result, ParseError)
    assert result.text == "29/02/2026"
    assert "day out of range" in result.reason


@pytest.mark.parametrize(
    "text",
    [
        "1/10/2025",  # one-digit day
        "01/1/2025",  # one-digit month
        "01/10/25",  # two-digit year
        "01-10-2025",  # wrong separator
        "01/10/20255",  # five-digit year
        " 01/10/2025",  # leading whitespace
        "01/10/2025 ",  # trailing whitespace
        "2025/10/01",  # year first
        "ab/10/2025",  # letters
        "01/10/٢٠٢٥",  # non-ASCII digits
        "",
    ],
)
def test_malformed_text_rejected(text):
    """Test any deviation from the literal layout is rejected."""
    assert isinstance(parse_date(text), ParseError)


@pytest.mark.parametrize(
    "text",
    ["00/10/2025", "32/10/2025", "31/04/2025", "15/00/2025", "15/13/2025", "01/01/0000"],
)
def test_impossible_dates_rejected(text):
    """Test well-formed text naming a non-existent date is rejected."""
    assert isinstance(parse_date(text), ParseError)


@pytest.mark.parametrize("value", [None, 20251014, date(2025, 10, 14)])
def test_non_text_rejected(value):
    """Test non-string input returns a ParseError instead of raising."""
    # Act
    result = parse_date(value)

    # Assert
    assert isinstance(result, ParseError)
    assert "expected text" in result.reason


@pytest.mark.parametrize(
    ("year", "expected"),
    [(2024, True), (2026, False), (1900, False), (2000, True), (2100, False)],
)
def test_is_leap_year(year, expected):
    """Test Gregorian leap year rule including centuries."""
    assert is_leap_year(year) is expected


def test_days_in_month():
    """Test month lengths."""
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(2025, 4) == 30
    assert days_in_month(2025, 12) == 31


def test_days_in_month_invalid_month_raises():
    """Test month outside 1-12 raises ValueError."""
    with pytest.raises(ValueError, match="Month out of range"):
        days_in_month(2025, 13)


def test_calendar_dates_order_chronologically():
    """Test CalendarDate comparison follows the calendar."""
    assert CalendarDate(2025, 10, 14) < CalendarDate(2025, 10, 20)
    assert CalendarDate(2025, 12, 31) < CalendarDate(2026, 1, 1)
    assert CalendarDate.from_date(date(2025, 10, 14)) == CalendarDate(2025, 10, 14)


def test_format_date_pads_fields():
    """Test formatting writes the same literal layout parse_date reads."""
    assert format_date(CalendarDate(2025, 3, 5)) == "05/03/2025"
