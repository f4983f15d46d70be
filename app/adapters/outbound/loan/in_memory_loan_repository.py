"""In-memory loan repository adapter."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from app.application.ports.loan_repository import LoanRepository
from app.domain.entities.loan import Loan
from app.domain.exceptions import LoanAlreadyExistsError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.interest_rate import InterestRate
from app.domain.value_objects.loan_status import LoanStatus
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount


@dataclass(frozen=True)
class LoanRecord:
    """Stored state of a loan."""

    id: UUID
    user_id: UUID
    number: str
    loan_type: str
    amount: float
    duration_months: int
    interest_rate: float
    status: str
    created_at: datetime
    project_description: Optional[str] = None
    review_started_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    funded_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None


class InMemoryLoanRepository(LoanRepository):
    """In-memory implementation of loan repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[UUID, LoanRecord] = {}

    def _entity_to_record(self, loan: Loan) -> LoanRecord:
        """
        Convert a Loan aggregate to a stored record.

        Args:
            loan: Loan aggregate

        Returns:
            LoanRecord holding the loan's current state
        """
        return LoanRecord(
            id=loan.id,
            user_id=loan.user_id,
            number=loan.number,
            loan_type=loan.loan_type.value,
            amount=loan.amount.value,
            duration_months=loan.duration.months,
            interest_rate=loan.interest_rate.annual_rate,
            status=loan.status.value,
            created_at=loan.created_at,
            project_description=loan.project_description,
            review_started_at=loan.review_started_at,
            approved_at=loan.approved_at,
            funded_at=loan.funded_at,
            rejection_reason=loan.rejection_reason,
        )

    def _record_to_entity(self, record: LoanRecord) -> Loan:
        """
        Rebuild a Loan aggregate from a stored record.

        Args:
            record: Stored record

        Returns:
            Fresh Loan instance with no uncommitted events
        """
        return Loan(
            loan_id=record.id,
            user_id=record.user_id,
            number=record.number,
            loan_type=LoanType(record.loan_type),
            amount=Amount(record.amount),
            duration=Duration(record.duration_months),
            interest_rate=InterestRate(record.interest_rate),
            status=LoanStatus(record.status),
            created_at=record.created_at,
            project_description=record.project_description,
            review_started_at=record.review_started_at,
            approved_at=record.approved_at,
            funded_at=record.funded_at,
            rejection_reason=record.rejection_reason,
        )

    async def save(self, loan: Loan) -> None:
        """
        Save a loan (upsert by id).

        Args:
            loan: Loan aggregate to save

        Raises:
            LoanAlreadyExistsError: If another loan already uses the same number
        """
        for record in self._storage.values():
            if record.number == loan.number and record.id != loan.id:
                raise LoanAlreadyExistsError(f"Loan number {loan.number} is already taken")
        self._storage[loan.id] = self._entity_to_record(loan)

    async def get(self, loan_id: UUID) -> Optional[Loan]:
        record = self._storage.get(loan_id)
        if record is None:
            return None
        return self._record_to_entity(record)

    async def get_by_number(self, number: str) -> Optional[Loan]:
        for record in self._storage.values():
            if record.number == number:
                return self._record_to_entity(record)
        return None

    async def list_by_user(self, user_id: UUID) -> list[Loan]:
        return [
            self._record_to_entity(record)
            for record in self._storage.values()
            if record.user_id == user_id
        ]

    async def list_active_for_user(self, user_id: UUID) -> list[Loan]:
        loans = await self.list_by_user(user_id)
        return [loan for loan in loans if loan.is_active()]

    async def list_by_status(self, status: LoanStatus) -> list[Loan]:
        return [
            self._record_to_entity(record)
            for record in self._storage.values()
            if record.status == status.value
        ]

    async def list_pending(self) -> list[Loan]:
        return await self.list_by_status(LoanStatus.PENDING)

    def next_identity(self) -> UUID:
        return uuid4()

    async def list(self) -> list[Loan]:
        """
        List all loans.

        Returns:
            List of all loans in insertion order
        """
        return [self._record_to_entity(record) for record in self._storage.values()]
