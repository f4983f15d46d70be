"""Monetary value objects."""

import math
from dataclasses import dataclass

from app.domain.exceptions import ValidationError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.interest_rate import InterestRate

# Global ceiling for a requested loan amount
MAX_AMOUNT = 1_000_000.0

# Values closer than one cent are the same amount of money
EQUALITY_TOLERANCE = 0.01


@dataclass(frozen=True, eq=False)
class Money:
    """Non-negative monetary value produced by loan arithmetic."""

    value: float

    def __post_init__(self) -> None:
        """Validate money value."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError("Money value must be a number")
        if not math.isfinite(self.value):
            raise ValidationError("Money value must be finite")
        if self.value < 0:
            raise ValidationError("Money value cannot be negative")
        object.__setattr__(self, "value", float(self.value))

    def __add__(self, other: "Money") -> "Money":
        """Add two money values."""
        return type(self)(self.value + other.value)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two money values."""
        return type(self)(self.value - other.value)

    def __mul__(self, factor: float) -> "Money":
        """Multiply money by a scalar."""
        return type(self)(self.value * factor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # fuzzy equality

    def __lt__(self, other: "Money") -> bool:
        return self.value < other.value

    def __le__(self, other: "Money") -> bool:
        return self.value <= other.value

    def __gt__(self, other: "Money") -> bool:
        return self.value > other.value

    def __ge__(self, other: "Money") -> bool:
        return self.value >= other.value

    def __str__(self) -> str:
        return f"{self.value:,.2f}"

    def add(self, other: "Money") -> "Money":
        return self + other

    def subtract(self, other: "Money") -> "Money":
        return self - other

    def multiply(self, factor: float) -> "Money":
        return self * factor

    def equals(self, other: "Money") -> bool:
        """Compare with a tolerance of one cent."""
        return abs(self.value - other.value) < EQUALITY_TOLERANCE


@dataclass(frozen=True, eq=False)
class Amount(Money):
    """
    Requested loan amount.

    Strictly positive and capped at MAX_AMOUNT. Arithmetic on an Amount
    yields an Amount, so results leaving the range raise ValidationError.
    """

    def __post_init__(self) -> None:
        """Validate amount range."""
        is_number = isinstance(self.value, (int, float)) and not isinstance(self.value, bool)
        if is_number and self.value <= 0:
            raise ValidationError("Amount must be positive")
        super().__post_init__()
        if self.value > MAX_AMOUNT:
            raise ValidationError(f"Amount exceeds maximum limit of {MAX_AMOUNT:,.0f}")

    @classmethod
    def from_float(cls, value: float) -> "Amount":
        """Create an amount from a plain number."""
        return cls(value)

    def calculate_monthly_payment(self, rate: InterestRate, duration: Duration) -> Money:
        """
        Calculate the fixed monthly payment that amortizes this amount.

        Args:
            rate: Annual interest rate
            duration: Repayment duration

        Returns:
            Monthly payment (may round below one cent for tiny principals)
        """
        # M = P * m / (1 - (1 + m)^-n)
        # Where:
        # P = principal, m = monthly rate, n = number of months
        monthly_rate = rate.monthly_rate
        months = duration.months

        if monthly_rate == 0:
            return Money(self.value / months)

        # 1 - (1 + m)^-n without cancellation for small m
        denominator = -math.expm1(-months * math.log1p(monthly_rate))
        return Money(self.value * monthly_rate / denominator)
