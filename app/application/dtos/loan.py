"""Loan DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from app.application.dtos.base import DTO
from app.domain.entities.loan import Loan
from app.domain.value_objects.loan_status import LoanStatus
from app.domain.value_objects.loan_type import LoanType


class CreateLoanApplicationCommand(DTO):
    """Input for creating a loan application."""

    user_id: UUID
    loan_type: LoanType
    amount: float
    duration_months: int
    project_description: Optional[str] = None
    loan_id: Optional[UUID] = None  # Allocated by the repository when omitted


class LoanView(DTO):
    """Read model of a loan."""

    id: UUID
    user_id: UUID
    number: str
    loan_type: LoanType
    amount: float
    duration_months: int
    annual_interest_rate: float
    status: LoanStatus
    status_label: str
    project_description: Optional[str] = None
    created_at: datetime
    review_started_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    funded_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    monthly_payment: float
    total_amount: float
    total_interest: float
    available_transitions: list[LoanStatus]

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanView":
        """
        Build a view from a loan aggregate.

        Args:
            loan: Loan aggregate

        Returns:
            LoanView with payment figures rounded to cents
        """
        return cls(
            id=loan.id,
            user_id=loan.user_id,
            number=loan.number,
            loan_type=loan.loan_type,
            amount=loan.amount.value,
            duration_months=loan.duration.months,
            annual_interest_rate=loan.interest_rate.annual_rate,
            status=loan.status,
            status_label=loan.status.label,
            project_description=loan.project_description,
            created_at=loan.created_at,
            review_started_at=loan.review_started_at,
            approved_at=loan.approved_at,
            funded_at=loan.funded_at,
            rejection_reason=loan.rejection_reason,
            monthly_payment=round(loan.calculate_monthly_payment().value, 2),
            total_amount=round(loan.calculate_total_amount().value, 2),
            total_interest=round(loan.calculate_total_interest().value, 2),
            available_transitions=sorted(loan.available_transitions(), key=lambda s: s.value),
        )


class LoanPage(DTO):
    """Paginated list of loans."""

    items: list[LoanView]
    page: int
    limit: int
    total: int


class LoanPlan(DTO):
    """Repayment plan quote."""

    loan_type: LoanType
    amount: float
    duration_months: int
    annual_interest_rate: float
    monthly_payment: float
    total_amount: float
    total_interest: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "loan_type": "personal",
                "amount": 15000.0,
                "duration_months": 36,
                "annual_interest_rate": 0.035,
                "monthly_payment": 439.53,
                "total_amount": 15823.08,
                "total_interest": 823.08,
            }
        }
    )


class LoanStatistics(DTO):
    """Aggregated portfolio figures."""

    total_loans: int
    status_counts: dict[LoanStatus, int]
    total_requested_amount: float
    average_requested_amount: float
    approval_rate: float
    completion_rate: float
    default_rate: float
