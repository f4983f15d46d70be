"""Loan aggregate."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from app.domain.events.loan_events import (
    DomainEvent,
    LoanApplicationCreated,
    LoanStatusChanged,
)
from app.domain.exceptions import InvalidTransitionError, PreconditionFailedError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.interest_rate import InterestRate
from app.domain.value_objects.loan_status import LoanStatus
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount, Money


class Loan:
    """
    Loan aggregate.

    Holds its current state directly. Status only changes through the
    lifecycle operations, each of which either succeeds and records exactly
    one domain event, or raises and leaves the loan untouched. Recorded
    events are buffered until the caller marks them committed.
    """

    def __init__(
        self,
        loan_id: UUID,
        user_id: UUID,
        number: str,
        loan_type: LoanType,
        amount: Amount,
        duration: Duration,
        interest_rate: InterestRate,
        status: LoanStatus,
        created_at: datetime,
        project_description: Optional[str] = None,
        review_started_at: Optional[datetime] = None,
        approved_at: Optional[datetime] = None,
        funded_at: Optional[datetime] = None,
        rejection_reason: Optional[str] = None,
    ) -> None:
        """
        Rebuild a loan from known state without recording any event.

        Use Loan.create for new applications.
        """
        self._id = loan_id
        self._user_id = user_id
        self._number = number
        self._type = loan_type
        self._amount = amount
        self._duration = duration
        self._interest_rate = interest_rate
        self._status = status
        self._created_at = created_at
        self._project_description = project_description
        self._review_started_at = review_started_at
        self._approved_at = approved_at
        self._funded_at = funded_at
        self._rejection_reason = rejection_reason
        self._events: list[DomainEvent] = []

    @classmethod
    def create(
        cls,
        loan_id: UUID,
        user_id: UUID,
        number: str,
        loan_type: LoanType,
        amount: Amount,
        duration: Duration,
        project_description: Optional[str] = None,
    ) -> "Loan":
        """
        Create a new pending loan application.

        Args:
            loan_id: Identity of the new loan
            user_id: Owning user
            number: Human-readable loan number
            loan_type: Loan product
            amount: Requested principal
            duration: Requested duration
            project_description: Optional free-text description

        Returns:
            Pending loan with one LoanApplicationCreated event recorded

        Raises:
            AmountExceedsTypeCeilingError: If amount is above the type maximum
            DurationExceedsTypeCeilingError: If duration is above the type maximum
        """
        loan_type.ensure_allows(amount, duration)

        created_at = datetime.now(timezone.utc)
        loan = cls(
            loan_id=loan_id,
            user_id=user_id,
            number=number,
            loan_type=loan_type,
            amount=amount,
            duration=duration,
            interest_rate=InterestRate.from_decimal(loan_type.base_interest_rate),
            status=LoanStatus.PENDING,
            created_at=created_at,
            project_description=project_description,
        )
        loan._record(
            LoanApplicationCreated(
                loan_id=loan_id,
                user_id=user_id,
                loan_number=number,
                occurred_on=created_at,
            )
        )
        return loan

    # Lifecycle operations

    def start_review(self) -> None:
        event = self._change_status(LoanStatus.UNDER_REVIEW)
        self._review_started_at = event.occurred_on

    def approve(self) -> None:
        event = self._change_status(LoanStatus.APPROVED)
        self._approved_at = event.occurred_on

    def reject(self, reason: Optional[str] = None) -> None:
        reason = reason.strip() if reason and reason.strip() else None
        self._change_status(LoanStatus.REJECTED, reason=reason)
        self._rejection_reason = reason

    def fund(self) -> None:
        event = self._change_status(LoanStatus.FUNDED)
        self._funded_at = event.occurred_on

    def activate(self) -> None:
        if self._status is not LoanStatus.FUNDED:
            raise PreconditionFailedError("Loan must be funded before activation")
        self._change_status(LoanStatus.ACTIVE)

    def complete(self) -> None:
        self._change_status(LoanStatus.COMPLETED)

    def mark_as_default(self) -> None:
        self._change_status(LoanStatus.DEFAULTED)

    def cancel(self) -> None:
        if self._status.is_final():
            raise PreconditionFailedError("Cannot cancel a finalized loan")
        self._change_status(LoanStatus.CANCELLED)

    def _change_status(
        self, new_status: LoanStatus, reason: Optional[str] = None
    ) -> LoanStatusChanged:
        if not self._status.can_transition_to(new_status):
            raise InvalidTransitionError(self._status, new_status)

        event = LoanStatusChanged(
            loan_id=self._id,
            previous_status=self._status,
            new_status=new_status,
            reason=reason,
        )
        self._status = new_status
        self._record(event)
        return event

    # Derived queries

    def is_active(self) -> bool:
        return self._status.is_active()

    def is_final(self) -> bool:
        return self._status.is_final()

    def available_transitions(self) -> frozenset[LoanStatus]:
        return self._status.allowed_transitions()

    # Amortization

    def calculate_monthly_payment(self) -> Money:
        return self._amount.calculate_monthly_payment(self._interest_rate, self._duration)

    def calculate_total_amount(self) -> Money:
        return self.calculate_monthly_payment() * self._duration.months

    def calculate_total_interest(self) -> Money:
        # Clamp rounding noise of the zero-rate case
        interest = self.calculate_total_amount().value - self._amount.value
        return Money(max(interest, 0.0))

    # Domain events

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)

    @property
    def uncommitted_events(self) -> list[DomainEvent]:
        """Events recorded since the last commit, in emission order."""
        return list(self._events)

    def mark_events_committed(self) -> None:
        self._events.clear()

    # State

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def number(self) -> str:
        return self._number

    @property
    def loan_type(self) -> LoanType:
        return self._type

    @property
    def amount(self) -> Amount:
        return self._amount

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def interest_rate(self) -> InterestRate:
        return self._interest_rate

    @property
    def status(self) -> LoanStatus:
        return self._status

    @property
    def project_description(self) -> Optional[str]:
        return self._project_description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def review_started_at(self) -> Optional[datetime]:
        return self._review_started_at

    @property
    def approved_at(self) -> Optional[datetime]:
        return self._approved_at

    @property
    def funded_at(self) -> Optional[datetime]:
        return self._funded_at

    @property
    def rejection_reason(self) -> Optional[str]:
        return self._rejection_reason

    def __repr__(self) -> str:
        return f"Loan(id={self._id!s}, number={self._number!r}, status={self._status.value})"
