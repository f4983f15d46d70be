"""Loan type value object."""

from enum import Enum
from typing import NamedTuple

from app.domain.exceptions import (
    AmountExceedsTypeCeilingError,
    DurationExceedsTypeCeilingError,
)


class LoanTypeLimits(NamedTuple):
    """Static lending limits of a loan type."""

    label: str
    max_amount: float
    max_duration_months: int
    base_interest_rate: float


class LoanType(str, Enum):
    """Closed set of loan products."""

    PERSONAL = "personal"
    AUTO = "auto"
    MORTGAGE = "mortgage"
    BUSINESS = "business"
    STUDENT = "student"
    RENOVATION = "renovation"

    @property
    def limits(self) -> LoanTypeLimits:
        return _LOAN_TYPE_LIMITS[self]

    @property
    def label(self) -> str:
        return self.limits.label

    @property
    def max_amount(self) -> float:
        return self.limits.max_amount

    @property
    def max_duration_months(self) -> int:
        return self.limits.max_duration_months

    @property
    def base_interest_rate(self) -> float:
        """Base annual rate as a decimal fraction."""
        return self.limits.base_interest_rate

    def ensure_allows(self, amount, duration) -> None:
        """
        Check a requested amount and duration against this type's ceilings.

        Args:
            amount: Requested Amount
            duration: Requested Duration

        Raises:
            AmountExceedsTypeCeilingError: If the amount is above the type maximum
            DurationExceedsTypeCeilingError: If the duration is above the type maximum
        """
        if amount.value > self.max_amount:
            raise AmountExceedsTypeCeilingError(
                f"Amount {amount.value:,.2f} exceeds maximum for {self.label} loans "
                f"({self.max_amount:,.2f})"
            )
        if duration.months > self.max_duration_months:
            raise DurationExceedsTypeCeilingError(
                f"Duration {duration.months} months exceeds maximum for {self.label} loans "
                f"({self.max_duration_months} months)"
            )


_LOAN_TYPE_LIMITS: dict[LoanType, LoanTypeLimits] = {
    LoanType.PERSONAL: LoanTypeLimits("Personal loan", 75_000.0, 96, 0.035),
    LoanType.AUTO: LoanTypeLimits("Auto loan", 80_000.0, 84, 0.025),
    LoanType.MORTGAGE: LoanTypeLimits("Mortgage", 1_000_000.0, 360, 0.015),
    LoanType.BUSINESS: LoanTypeLimits("Business loan", 500_000.0, 120, 0.04),
    LoanType.STUDENT: LoanTypeLimits("Student loan", 50_000.0, 120, 0.01),
    LoanType.RENOVATION: LoanTypeLimits("Renovation loan", 100_000.0, 144, 0.03),
}
