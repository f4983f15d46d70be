"""Dependency injection factory functions."""

from app.adapters.outbound.event_bus.in_memory_event_bus import InMemoryEventBus
from app.adapters.outbound.loan import InMemoryLoanRepository
from app.adapters.outbound.loan_number.timestamp_loan_number_generator import (
    TimestampLoanNumberGenerator,
)
from app.application.ports.event_bus import EventBus
from app.application.ports.loan_number_generator import LoanNumberGenerator
from app.application.ports.loan_repository import LoanRepository
from app.application.use_cases.calculate_loan_plan import LoanCalculator
from app.application.use_cases.create_loan_application import CreateLoanApplication
from app.application.use_cases.get_loan_statistics import GetLoanStatistics
from app.application.use_cases.get_loans import GetLoanById, GetUserLoans
from app.domain.events.loan_events import LoanApplicationCreated, LoanStatusChanged
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.event_listeners import (
    log_loan_application_created,
    log_loan_status_change,
)
from app.infrastructure.logging.logger import log_loan_event


def create_loan_repository() -> LoanRepository:
    """
    Factory function to create loan repository.

    Returns:
        LoanRepository instance
    """
    return InMemoryLoanRepository()


def create_event_bus() -> EventBus:
    """
    Factory function to create the event bus with the logging listeners subscribed.

    Returns:
        EventBus instance
    """
    event_bus = InMemoryEventBus()
    event_bus.subscribe(LoanApplicationCreated, log_loan_application_created)
    event_bus.subscribe(LoanStatusChanged, log_loan_status_change)
    return event_bus


def create_loan_number_generator() -> LoanNumberGenerator:
    """
    Factory function to create loan number generator.

    Returns:
        LoanNumberGenerator instance using the configured prefix
    """
    return TimestampLoanNumberGenerator(prefix=settings.loan_number_prefix)


def create_create_loan_application_use_case(
    repository: LoanRepository, event_bus: EventBus
) -> CreateLoanApplication:
    """
    Factory function to create CreateLoanApplication with dependencies.

    Returns:
        CreateLoanApplication instance
    """
    return CreateLoanApplication(
        repository,
        create_loan_number_generator(),
        event_bus,
        max_number_attempts=settings.loan_number_max_attempts,
        logger=log_loan_event,
    )


def create_get_user_loans_use_case(repository: LoanRepository) -> GetUserLoans:
    """
    Factory function to create GetUserLoans with configured page sizes.

    Returns:
        GetUserLoans instance
    """
    return GetUserLoans(
        repository,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


def create_get_loan_by_id_use_case(repository: LoanRepository) -> GetLoanById:
    return GetLoanById(repository)


def create_get_loan_statistics_use_case(repository: LoanRepository) -> GetLoanStatistics:
    return GetLoanStatistics(repository)


def create_loan_calculator() -> LoanCalculator:
    return LoanCalculator(logger=log_loan_event)
