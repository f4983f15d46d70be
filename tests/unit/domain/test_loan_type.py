"""Unit tests for LoanType value object."""

import pytest

from app.domain.exceptions import (
    AmountExceedsTypeCeilingError,
    DurationExceedsTypeCeilingError,
    ValidationError,
)
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount

EXPECTED_LIMITS = {
    LoanType.PERSONAL: (75_000.0, 96, 0.035),
    LoanType.AUTO: (80_000.0, 84, 0.025),
    LoanType.MORTGAGE: (1_000_000.0, 360, 0.015),
    LoanType.BUSINESS: (500_000.0, 120, 0.04),
    LoanType.STUDENT: (50_000.0, 120, 0.01),
    LoanType.RENOVATION: (100_000.0, 144, 0.03),
}


def test_closed_set_of_types():
    """Test that exactly six loan types exist."""
    assert {t.value for t in LoanType} == {
        "personal",
        "auto",
        "mortgage",
        "business",
        "student",
        "renovation",
    }


@pytest.mark.parametrize("loan_type", list(LoanType))
def test_limits(loan_type):
    """Test the static limits of every loan type."""
    max_amount, max_months, base_rate = EXPECTED_LIMITS[loan_type]

    assert loan_type.max_amount == max_amount
    assert loan_type.max_duration_months == max_months
    assert loan_type.base_interest_rate == base_rate
    assert loan_type.label


def test_lookup_by_value():
    """Test that types are built from their stored value."""
    assert LoanType("auto") is LoanType.AUTO


@pytest.mark.parametrize("loan_type", list(LoanType))
def test_ensure_allows_ceilings(loan_type):
    """Test that values exactly at the ceilings pass."""
    loan_type.ensure_allows(
        Amount(loan_type.max_amount), Duration(loan_type.max_duration_months)
    )


def test_ensure_allows_rejects_amount_above_ceiling():
    """Test that an amount above the type maximum is rejected."""
    with pytest.raises(AmountExceedsTypeCeilingError, match="Personal loan"):
        LoanType.PERSONAL.ensure_allows(Amount(75_001.0), Duration(12))


def test_ensure_allows_rejects_duration_above_ceiling():
    """Test that a duration above the type maximum is rejected."""
    with pytest.raises(DurationExceedsTypeCeilingError, match="84 months"):
        LoanType.AUTO.ensure_allows(Amount(10_000.0), Duration(85))


def test_ceiling_errors_are_validation_errors():
    """Test the ceiling errors belong to the validation family."""
    assert issubclass(AmountExceedsTypeCeilingError, ValidationError)
    assert issubclass(DurationExceedsTypeCeilingError, ValidationError)
