"""Loan query use cases."""

from typing import Optional
from uuid import UUID

from app.application.dtos.loan import LoanPage, LoanView
from app.application.ports.loan_repository import LoanRepository
from app.domain.exceptions import LoanNotFoundError, ValidationError
from app.domain.value_objects.loan_status import LoanStatus


class GetLoanById:
    """Use case for reading a single loan."""

    def __init__(self, repository: LoanRepository) -> None:
        self._repository = repository

    async def execute(self, loan_id: UUID) -> LoanView:
        """
        Get a loan.

        Args:
            loan_id: Loan identifier

        Returns:
            Loan view

        Raises:
            LoanNotFoundError: If the loan does not exist
        """
        loan = await self._repository.get(loan_id)
        if loan is None:
            raise LoanNotFoundError(f"Loan {loan_id} not found")
        return LoanView.from_entity(loan)


class GetUserLoans:
    """Use case for listing a user's loans page by page."""

    def __init__(
        self,
        repository: LoanRepository,
        default_limit: int = 20,
        max_limit: int = 100,
    ) -> None:
        """
        Initialize user loans query.

        Args:
            repository: Loan repository
            default_limit: Page size used when none is given
            max_limit: Largest accepted page size
        """
        self._repository = repository
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def execute(
        self,
        user_id: UUID,
        status: Optional[LoanStatus] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> LoanPage:
        """
        List a user's loans.

        Args:
            user_id: Owning user
            status: Optional status filter
            page: 1-based page number
            limit: Page size (default from configuration)

        Returns:
            Page of loan views, oldest first

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = self._default_limit if limit is None else limit
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not 1 <= limit <= self._max_limit:
            raise ValidationError(f"Limit must be between 1 and {self._max_limit}")

        loans = await self._repository.list_by_user(user_id)
        if status is not None:
            loans = [loan for loan in loans if loan.status is status]

        start = (page - 1) * limit
        return LoanPage(
            items=[LoanView.from_entity(loan) for loan in loans[start : start + limit]],
            page=page,
            limit=limit,
            total=len(loans),
        )
