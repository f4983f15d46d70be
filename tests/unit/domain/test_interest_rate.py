"""Unit tests for InterestRate value object."""

import pytest

from app.domain.exceptions import ValidationError
from app.domain.value_objects.interest_rate import InterestRate


def test_from_percentage():
    """Test creating a rate from a percentage."""
    rate = InterestRate.from_percentage(3.5)
    assert rate.annual_rate == pytest.approx(0.035)
    assert rate.percentage == pytest.approx(3.5)


def test_from_decimal():
    """Test creating a rate from a decimal fraction."""
    rate = InterestRate.from_decimal(0.12)
    assert rate.annual_rate == 0.12
    assert rate.monthly_rate == pytest.approx(0.01)


@pytest.mark.parametrize("value", [0.0, 0.25, 0.5])
def test_accepts_bounds(value):
    """Test that 0% and 50% are valid rates."""
    assert InterestRate(value).annual_rate == value


def test_rejects_negative_rate():
    """Test that a negative rate is rejected."""
    with pytest.raises(ValidationError, match="cannot be negative"):
        InterestRate(-0.01)


def test_rejects_rate_above_fifty_percent():
    """Test that a rate above 50% is rejected."""
    with pytest.raises(ValidationError, match="cannot exceed 50%"):
        InterestRate.from_percentage(50.5)


def test_fuzzy_equality():
    """Test that rates closer than 0.0001 are equal."""
    assert InterestRate(0.035) == InterestRate(0.03505)
    assert InterestRate(0.035) != InterestRate(0.036)


def test_str():
    """Test human-readable formatting."""
    assert str(InterestRate.from_decimal(0.035)) == "3.50%"
