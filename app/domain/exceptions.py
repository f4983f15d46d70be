"""Loan domain exception hierarchy."""


class LoanDomainError(Exception):
    """Base exception for all loan domain errors."""


class ValidationError(LoanDomainError, ValueError):
    """Raised when a value is outside its allowed range."""


class AmountExceedsTypeCeilingError(ValidationError):
    """Raised when a requested amount exceeds the loan type's maximum."""


class DurationExceedsTypeCeilingError(ValidationError):
    """Raised when a requested duration exceeds the loan type's maximum."""


class InvalidTransitionError(LoanDomainError):
    """Raised when a status change is not allowed by the transition table."""

    def __init__(self, current_status, requested_status) -> None:
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot transition from {current_status.label} to {requested_status.label}"
        )


class PreconditionFailedError(LoanDomainError):
    """Raised when an operation's precondition on the loan status does not hold."""


class LoanNotFoundError(LoanDomainError):
    """Raised when a referenced loan does not exist."""


class LoanAlreadyExistsError(LoanDomainError):
    """Raised when a loan identity or number is already taken."""
