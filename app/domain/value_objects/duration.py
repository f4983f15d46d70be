"""Loan duration value object."""

from dataclasses import dataclass

from app.domain.exceptions import ValidationError

MIN_MONTHS = 6
MAX_MONTHS = 360


@dataclass(frozen=True)
class Duration:
    """Loan duration in whole months."""

    months: int

    def __post_init__(self) -> None:
        """Validate duration."""
        if isinstance(self.months, bool) or not isinstance(self.months, int):
            raise ValidationError("Duration must be a whole number of months")
        if self.months < MIN_MONTHS:
            raise ValidationError(f"Duration must be at least {MIN_MONTHS} months")
        if self.months > MAX_MONTHS:
            raise ValidationError(f"Duration cannot exceed {MAX_MONTHS} months (30 years)")

    @classmethod
    def from_months(cls, months: int) -> "Duration":
        return cls(months)

    @classmethod
    def from_years(cls, years: int) -> "Duration":
        return cls(years * 12)

    @property
    def years(self) -> float:
        """Get duration in years."""
        return self.months / 12

    def __str__(self) -> str:
        if self.months % 12 == 0:
            years = self.months // 12
            return f"{years} year" + ("s" if years > 1 else "")
        return f"{self.months} months"
