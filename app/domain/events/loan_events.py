"""Loan domain events."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional
from uuid import UUID

from app.domain.value_objects.loan_status import LoanStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(ABC):
    """Immutable record of something that happened to a loan."""

    event_name: ClassVar[str]
    occurred_on: datetime

    @abstractmethod
    def payload(self) -> dict[str, Any]:
        """
        Serializable view of the event.

        Returns:
            Dictionary with string ids, status values and ISO-8601 timestamps
        """


@dataclass(frozen=True)
class LoanApplicationCreated(DomainEvent):
    """Emitted once, when a loan application is created."""

    event_name: ClassVar[str] = "loan.application.created"

    loan_id: UUID
    user_id: UUID
    loan_number: str
    occurred_on: datetime = field(default_factory=_utcnow)

    def payload(self) -> dict[str, Any]:
        return {
            "loan_id": str(self.loan_id),
            "user_id": str(self.user_id),
            "loan_number": self.loan_number,
            "occurred_on": self.occurred_on.isoformat(),
        }


@dataclass(frozen=True)
class LoanStatusChanged(DomainEvent):
    """Emitted once per successful status transition."""

    event_name: ClassVar[str] = "loan.status.changed"

    loan_id: UUID
    previous_status: LoanStatus
    new_status: LoanStatus
    reason: Optional[str] = None  # Only set on rejection
    occurred_on: datetime = field(default_factory=_utcnow)

    def payload(self) -> dict[str, Any]:
        return {
            "loan_id": str(self.loan_id),
            "previous_status": self.previous_status.value,
            "new_status": self.new_status.value,
            "reason": self.reason,
            "occurred_on": self.occurred_on.isoformat(),
        }
