"""Loan lifecycle use cases."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional
from uuid import UUID

from app.application.dtos.loan import LoanView
from app.application.ports.event_bus import EventBus
from app.application.ports.loan_repository import LoanRepository
from app.domain.entities.loan import Loan
from app.domain.exceptions import LoanDomainError, LoanNotFoundError

LoanLogger = Callable[..., None]


async def save_and_publish(
    repository: LoanRepository, event_bus: EventBus, loan: Loan
) -> None:
    """
    Persist a loan, then publish and commit its uncommitted events.

    Args:
        repository: Loan repository
        event_bus: Event bus receiving the events in emission order
        loan: Loan aggregate
    """
    await repository.save(loan)
    await event_bus.dispatch_events(loan.uncommitted_events)
    loan.mark_events_committed()


class LoanStatusUseCase(ABC):
    """Base for use cases that run one lifecycle operation on a stored loan."""

    operation: str = ""

    def __init__(
        self,
        repository: LoanRepository,
        event_bus: EventBus,
        logger: Optional[LoanLogger] = None,
    ) -> None:
        """
        Initialize lifecycle use case.

        Args:
            repository: Loan repository
            event_bus: Event bus for domain events
            logger: Optional logger function (loan_id, component, **kwargs)
        """
        self._repository = repository
        self._event_bus = event_bus
        self._logger = logger

    def _log(self, loan_id: UUID, **kwargs: Any) -> None:
        if self._logger:
            self._logger(loan_id, "use_case", operation=self.operation, **kwargs)

    @abstractmethod
    def _apply(self, loan: Loan, **kwargs: Any) -> None:
        pass

    async def _run(self, loan_id: UUID, **kwargs: Any) -> LoanView:
        loan = await self._repository.get(loan_id)
        if loan is None:
            self._log(loan_id, level=logging.WARNING, error_type=LoanNotFoundError.__name__)
            raise LoanNotFoundError(f"Loan {loan_id} not found")

        status_before = loan.status
        try:
            self._apply(loan, **kwargs)
        except LoanDomainError as e:
            self._log(
                loan_id,
                level=logging.WARNING,
                status=status_before.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        await save_and_publish(self._repository, self._event_bus, loan)
        self._log(
            loan_id,
            status_before=status_before.value,
            status_after=loan.status.value,
        )
        return LoanView.from_entity(loan)

    async def execute(self, loan_id: UUID) -> LoanView:
        """
        Run the operation on a loan.

        Args:
            loan_id: Loan identifier

        Returns:
            Updated loan view

        Raises:
            LoanNotFoundError: If the loan does not exist
            InvalidTransitionError: If the status table forbids the change
            PreconditionFailedError: If the operation's status guard fails
        """
        return await self._run(loan_id)


class StartLoanReview(LoanStatusUseCase):
    """Move a pending loan under review."""

    operation = "start_review"

    def _apply(self, loan: Loan) -> None:
        loan.start_review()


class ApproveLoan(LoanStatusUseCase):
    """Approve a loan under review."""

    operation = "approve"

    def _apply(self, loan: Loan) -> None:
        loan.approve()


class RejectLoan(LoanStatusUseCase):
    """Reject a loan under review, recording the reason."""

    operation = "reject"

    async def execute(self, loan_id: UUID, reason: Optional[str] = None) -> LoanView:
        """
        Reject a loan.

        Args:
            loan_id: Loan identifier
            reason: Optional rejection reason kept on the loan

        Returns:
            Updated loan view
        """
        return await self._run(loan_id, reason=reason)

    def _apply(self, loan: Loan, reason: Optional[str] = None) -> None:
        loan.reject(reason)


class FundLoan(LoanStatusUseCase):
    operation = "fund"

    def _apply(self, loan: Loan) -> None:
        loan.fund()


class ActivateLoan(LoanStatusUseCase):
    operation = "activate"

    def _apply(self, loan: Loan) -> None:
        loan.activate()


class CompleteLoan(LoanStatusUseCase):
    operation = "complete"

    def _apply(self, loan: Loan) -> None:
        loan.complete()


class MarkLoanAsDefaulted(LoanStatusUseCase):
    operation = "mark_as_default"

    def _apply(self, loan: Loan) -> None:
        loan.mark_as_default()


class CancelLoan(LoanStatusUseCase):
    operation = "cancel"

    def _apply(self, loan: Loan) -> None:
        loan.cancel()
