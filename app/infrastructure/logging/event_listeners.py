"""Domain event listeners that write the loan audit trail to the log."""

from app.domain.events.loan_events import LoanApplicationCreated, LoanStatusChanged
from app.infrastructure.logging.logger import log_loan_created, log_status_transition


def log_loan_application_created(event: LoanApplicationCreated) -> None:
    """
    Log a new loan application.

    Args:
        event: LoanApplicationCreated event
    """
    log_loan_created(
        event.loan_id,
        event.user_id,
        event.loan_number,
        component="listener",
        occurred_on=event.occurred_on.isoformat(),
    )


def log_loan_status_change(event: LoanStatusChanged) -> None:
    """
    Log a loan status change.

    Args:
        event: LoanStatusChanged event
    """
    fields = {"occurred_on": event.occurred_on.isoformat()}
    if event.reason is not None:
        fields["reason"] = event.reason

    log_status_transition(
        event.loan_id,
        event.previous_status.value,
        event.new_status.value,
        component="listener",
        **fields,
    )
