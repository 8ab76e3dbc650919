"""Tests for RuleRegistry"""

import pytest

from flightcheck.core.errors import RuleRegistryError
from flightcheck.validation.registry import RuleRegistry
from flightcheck.validation.rules import booking_rules


def test_register_and_get_rule():
    """Test registering and retrieving a rule"""
    # Arrange
    registry = RuleRegistry()

    @registry.register("always")
    def always(ctx) -> bool:
        return True

    # Act
    rule = registry.get("always")

    # Assert
    assert rule is always
    assert "always" in registry
    assert registry.is_registered("always")


def test_rules_keep_registration_order():
    """Test rules iterate in the order they were registered"""
    # Arrange
    registry = RuleRegistry()
    for name in ("b", "a", "c"):
        registry.register(name)(lambda ctx: True)

    # Act & Assert
    assert registry.names() == ["b", "a", "c"]
    assert [name for name, _ in registry] == ["b", "a", "c"]
    assert len(registry) == 3


def test_duplicate_registration_raises():
    """Test a rule name can only be registered once"""
    # Arrange
    registry = RuleRegistry()
    registry.register("dup")(lambda ctx: True)

    # Act & Assert
    with pytest.raises(RuleRegistryError, match="already registered"):
        registry.register("dup")(lambda ctx: False)


def test_get_nonexistent_rule():
    """Test getting a non-existent rule raises error"""
    with pytest.raises(RuleRegistryError, match="not registered"):
        RuleRegistry().get("missing")


def test_without_returns_filtered_copy():
    """Test without() leaves the source registry untouched"""
    # Act
    reduced = booking_rules.without("departure_not_past")

    # Assert
    assert "departure_not_past" not in reduced
    assert len(reduced) == len(booking_rules) - 1
    assert "departure_not_past" in booking_rules


def test_without_unknown_rule_raises():
    """Test without() rejects names that are not registered"""
    with pytest.raises(RuleRegistryError):
        booking_rules.without("no_such_rule")


def test_booking_rules_reference_order():
    """Test the booking rules are registered in reference order"""
    assert booking_rules.names() == [
        "passenger_total",
        "child_seating",
        "infant_seating",
        "child_ratio",
        "infant_ratio",
        "departure_not_past",
        "valid_dates",
        "return_after_departure",
        "seating_class",
        "emergency_row_economy",
        "airports",
    ]
