"""Dependency injection container."""

from app.application.ports.event_bus import EventBus
from app.application.ports.loan_repository import LoanRepository
from app.application.use_cases.calculate_loan_plan import LoanCalculator
from app.application.use_cases.create_loan_application import CreateLoanApplication
from app.application.use_cases.get_loan_statistics import GetLoanStatistics
from app.application.use_cases.get_loans import GetLoanById, GetUserLoans
from app.application.use_cases.loan_lifecycle import (
    ActivateLoan,
    ApproveLoan,
    CancelLoan,
    CompleteLoan,
    FundLoan,
    MarkLoanAsDefaulted,
    RejectLoan,
    StartLoanReview,
)
from app.infrastructure.logging.logger import log_loan_event
from app.infrastructure.wiring.dependencies import (
    create_create_loan_application_use_case,
    create_event_bus,
    create_get_loan_by_id_use_case,
    create_get_loan_statistics_use_case,
    create_get_user_loans_use_case,
    create_loan_calculator,
    create_loan_repository,
)


class Container:
    """Dependency injection container."""

    def __init__(self) -> None:
        """Initialize container with dependencies."""
        # Shared adapters
        self._loan_repository: LoanRepository = create_loan_repository()
        self._event_bus: EventBus = create_event_bus()

        # Command use cases
        self._create_loan_application = create_create_loan_application_use_case(
            self._loan_repository, self._event_bus
        )
        lifecycle_args = (self._loan_repository, self._event_bus)
        self._start_loan_review = StartLoanReview(*lifecycle_args, logger=log_loan_event)
        self._approve_loan = ApproveLoan(*lifecycle_args, logger=log_loan_event)
        self._reject_loan = RejectLoan(*lifecycle_args, logger=log_loan_event)
        self._fund_loan = FundLoan(*lifecycle_args, logger=log_loan_event)
        self._activate_loan = ActivateLoan(*lifecycle_args, logger=log_loan_event)
        self._complete_loan = CompleteLoan(*lifecycle_args, logger=log_loan_event)
        self._mark_loan_as_defaulted = MarkLoanAsDefaulted(
            *lifecycle_args, logger=log_loan_event
        )
        self._cancel_loan = CancelLoan(*lifecycle_args, logger=log_loan_event)

        # Query use cases
        self._get_loan_by_id = create_get_loan_by_id_use_case(self._loan_repository)
        self._get_user_loans = create_get_user_loans_use_case(self._loan_repository)
        self._get_loan_statistics = create_get_loan_statistics_use_case(self._loan_repository)
        self._loan_calculator = create_loan_calculator()

    @property
    def loan_repository(self) -> LoanRepository:
        return self._loan_repository

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def create_loan_application(self) -> CreateLoanApplication:
        return self._create_loan_application

    @property
    def start_loan_review(self) -> StartLoanReview:
        return self._start_loan_review

    @property
    def approve_loan(self) -> ApproveLoan:
        return self._approve_loan

    @property
    def reject_loan(self) -> RejectLoan:
        return self._reject_loan

    @property
    def fund_loan(self) -> FundLoan:
        return self._fund_loan

    @property
    def activate_loan(self) -> ActivateLoan:
        return self._activate_loan

    @property
    def complete_loan(self) -> CompleteLoan:
        return self._complete_loan

    @property
    def mark_loan_as_defaulted(self) -> MarkLoanAsDefaulted:
        return self._mark_loan_as_defaulted

    @property
    def cancel_loan(self) -> CancelLoan:
        return self._cancel_loan

    @property
    def get_loan_by_id(self) -> GetLoanById:
        return self._get_loan_by_id

    @property
    def get_user_loans(self) -> GetUserLoans:
        return self._get_user_loans

    @property
    def get_loan_statistics(self) -> GetLoanStatistics:
        return self._get_loan_statistics

    @property
    def loan_calculator(self) -> LoanCalculator:
        return self._loan_calculator


# Global container instance
container = Container()
