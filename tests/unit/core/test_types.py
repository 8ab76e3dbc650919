"""Tests for booking value types."""

import dataclasses

import pytest

from flightcheck.core.types import BookingState, SubmitResult
from tests.factories import make_candidate


def test_candidate_is_immutable():
    """Test candidates cannot be modified after construction."""
    candidate = make_candidate()

    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.adult_count = 2  # type: ignore[misc]


def test_candidate_construction_does_not_validate():
    """Test invalid values are accepted at construction time."""
    candidate = make_candidate(adult_count=-5, seating_class="ultra", departure_date="nope")

    assert candidate.adult_count == -5


def test_state_from_candidate_copies_every_field():
    """Test committed state is a full copy of the candidate."""
    # Arrange
    candidate = make_candidate(child_count=2, infant_count=1, seating_class="premium-economy")

    # Act
    state = BookingState.from_candidate(candidate)

    # Assert
    assert isinstance(state, BookingState)
    assert state.to_dict() == candidate.to_dict()
    assert state is not candidate


def test_total_passengers():
    """Test passenger total sums all three counts."""
    assert make_candidate(adult_count=2, child_count=3, infant_count=1).total_passengers == 6


def test_submit_result_truthiness():
    """Test SubmitResult is truthy only when accepted."""
    assert SubmitResult(accepted=True)
    assert not SubmitResult(accepted=False, violations=("airports",))
