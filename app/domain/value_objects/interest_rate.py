"""Annual interest rate value object."""

import math
from dataclasses import dataclass

from app.domain.exceptions import ValidationError

MAX_ANNUAL_RATE = 0.5


@dataclass(frozen=True, eq=False)
class InterestRate:
    """Annual interest rate value object."""

    annual_rate: float  # As decimal (e.g., 0.035 for 3.5%)

    def __post_init__(self) -> None:
        """Validate annual rate."""
        if isinstance(self.annual_rate, bool) or not isinstance(self.annual_rate, (int, float)):
            raise ValidationError("Interest rate must be a number")
        if not math.isfinite(self.annual_rate):
            raise ValidationError("Interest rate must be finite")
        if self.annual_rate < 0:
            raise ValidationError("Interest rate cannot be negative")
        if self.annual_rate > MAX_ANNUAL_RATE:
            raise ValidationError("Interest rate cannot exceed 50%")
        object.__setattr__(self, "annual_rate", float(self.annual_rate))

    @classmethod
    def from_percentage(cls, percentage: float) -> "InterestRate":
        """Create a rate from a percentage (e.g., 3.5 for 3.5%)."""
        return cls(percentage / 100)

    @classmethod
    def from_decimal(cls, decimal: float) -> "InterestRate":
        """Create a rate from a decimal fraction (e.g., 0.035 for 3.5%)."""
        return cls(decimal)

    @property
    def monthly_rate(self) -> float:
        """Get monthly interest rate."""
        return self.annual_rate / 12

    @property
    def percentage(self) -> float:
        """Get rate as percentage (e.g., 3.5 for 3.5%)."""
        return self.annual_rate * 100

    def equals(self, other: "InterestRate") -> bool:
        return abs(self.annual_rate - other.annual_rate) < 0.0001

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterestRate):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.percentage:.2f}%"
