"""Create loan application use case."""

import logging
from typing import Optional

from app.application.dtos.loan import CreateLoanApplicationCommand, LoanView
from app.application.ports.event_bus import EventBus
from app.application.ports.loan_number_generator import LoanNumberGenerator
from app.application.ports.loan_repository import LoanRepository
from app.application.use_cases.loan_lifecycle import LoanLogger, save_and_publish
from app.domain.entities.loan import Loan
from app.domain.exceptions import LoanAlreadyExistsError, LoanDomainError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.money import Amount


class CreateLoanApplication:
    """Use case for opening a new loan application."""

    def __init__(
        self,
        repository: LoanRepository,
        number_generator: LoanNumberGenerator,
        event_bus: EventBus,
        max_number_attempts: int = 3,
        logger: Optional[LoanLogger] = None,
    ) -> None:
        """
        Initialize create loan application use case.

        Args:
            repository: Loan repository
            number_generator: Generator for human-readable loan numbers
            event_bus: Event bus for domain events
            max_number_attempts: Number generations tried before giving up on collisions
            logger: Optional logger function (loan_id, component, **kwargs)
        """
        self._repository = repository
        self._number_generator = number_generator
        self._event_bus = event_bus
        self._max_number_attempts = max(1, max_number_attempts)
        self._logger = logger

    async def _allocate_number(self) -> str:
        for _ in range(self._max_number_attempts):
            number = self._number_generator.generate()
            if await self._repository.get_by_number(number) is None:
                return number
        raise LoanAlreadyExistsError(
            f"Could not allocate a unique loan number after {self._max_number_attempts} attempts"
        )

    async def execute(self, command: CreateLoanApplicationCommand) -> LoanView:
        """
        Create a pending loan application.

        Args:
            command: Loan application input

        Returns:
            View of the new loan

        Raises:
            ValidationError: If amount or duration is out of range
            AmountExceedsTypeCeilingError: If amount is above the loan type maximum
            DurationExceedsTypeCeilingError: If duration is above the loan type maximum
            LoanAlreadyExistsError: If the requested id is taken or no unique number is found
        """
        loan_id = command.loan_id or self._repository.next_identity()

        try:
            if command.loan_id is not None and await self._repository.get(loan_id) is not None:
                raise LoanAlreadyExistsError(f"Loan with ID {loan_id} already exists")

            amount = Amount.from_float(command.amount)
            duration = Duration.from_months(command.duration_months)
            number = await self._allocate_number()

            loan = Loan.create(
                loan_id=loan_id,
                user_id=command.user_id,
                number=number,
                loan_type=command.loan_type,
                amount=amount,
                duration=duration,
                project_description=command.project_description,
            )
        except LoanDomainError as e:
            if self._logger:
                self._logger(
                    loan_id,
                    "use_case",
                    level=logging.WARNING,
                    operation="create",
                    loan_type=command.loan_type.value,
                    error_type=type(e).__name__,
                    error=str(e),
                )
            raise

        await save_and_publish(self._repository, self._event_bus, loan)

        if self._logger:
            self._logger(
                loan.id,
                "use_case",
                operation="create",
                loan_number=loan.number,
                loan_type=loan.loan_type.value,
                amount=loan.amount.value,
                duration_months=loan.duration.months,
            )

        return LoanView.from_entity(loan)
