"""Loan portfolio statistics use case."""

from datetime import datetime
from typing import Optional

from app.application.dtos.loan import LoanStatistics
from app.application.ports.loan_repository import LoanRepository
from app.domain.value_objects.loan_status import LoanStatus


class GetLoanStatistics:
    """Use case for aggregating portfolio figures."""

    def __init__(self, repository: LoanRepository) -> None:
        self._repository = repository

    async def execute(
        self,
        status: Optional[LoanStatus] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> LoanStatistics:
        """
        Compute statistics over the selected loans.

        Args:
            status: Only count loans in this status
            since: Only count loans created at or after this instant
            until: Only count loans created at or before this instant

        Returns:
            Loan statistics (zeros for an empty selection)
        """
        loans = await self._repository.list()
        if status is not None:
            loans = [loan for loan in loans if loan.status is status]
        if since is not None:
            loans = [loan for loan in loans if loan.created_at >= since]
        if until is not None:
            loans = [loan for loan in loans if loan.created_at <= until]

        status_counts = {s: 0 for s in LoanStatus}
        for loan in loans:
            status_counts[loan.status] += 1

        total = len(loans)
        total_requested = sum(loan.amount.value for loan in loans)
        approved = sum(1 for loan in loans if loan.approved_at is not None)
        active = status_counts[LoanStatus.ACTIVE]
        completed = status_counts[LoanStatus.COMPLETED]
        defaulted = status_counts[LoanStatus.DEFAULTED]

        return LoanStatistics(
            total_loans=total,
            status_counts=status_counts,
            total_requested_amount=round(total_requested, 2),
            average_requested_amount=round(total_requested / total, 2) if total else 0.0,
            approval_rate=_percentage(approved, total),
            completion_rate=_percentage(completed, active + completed),
            default_rate=_percentage(defaulted, total),
        )


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part / whole * 100, 2)
