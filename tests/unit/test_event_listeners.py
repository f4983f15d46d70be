"""Unit tests for the logging event listeners."""

import logging
from uuid import uuid4

from app.domain.events.loan_events import LoanApplicationCreated, LoanStatusChanged
from app.domain.value_objects.loan_status import LoanStatus
from app.infrastructure.logging.event_listeners import (
    log_loan_application_created,
    log_loan_status_change,
)
from app.infrastructure.logging.logger import log_loan_event


def test_creation_is_logged(caplog):
    """Test that a new application is written to the audit log."""
    caplog.set_level(logging.INFO, logger="loan_lifecycle")
    event = LoanApplicationCreated(
        loan_id=uuid4(), user_id=uuid4(), loan_number="DOC00000000011111"
    )

    log_loan_application_created(event)

    message = caplog.records[-1].getMessage()
    assert f"loan_id='{event.loan_id}'" in message
    assert "component='listener'" in message
    assert "loan_number='DOC00000000011111'" in message
    assert "occurred_on=" in message


def test_status_change_is_logged(caplog):
    """Test that a status change logs both statuses and the reason."""
    caplog.set_level(logging.INFO, logger="loan_lifecycle")
    event = LoanStatusChanged(
        loan_id=uuid4(),
        previous_status=LoanStatus.UNDER_REVIEW,
        new_status=LoanStatus.REJECTED,
        reason="Debt ratio too high",
    )

    log_loan_status_change(event)

    message = caplog.records[-1].getMessage()
    assert "status_before='under_review'" in message
    assert "status_after='rejected'" in message
    assert "reason='Debt ratio too high'" in message


def test_status_change_without_reason(caplog):
    """Test that no reason field is written when there is none."""
    caplog.set_level(logging.INFO, logger="loan_lifecycle")
    event = LoanStatusChanged(
        loan_id=uuid4(),
        previous_status=LoanStatus.PENDING,
        new_status=LoanStatus.UNDER_REVIEW,
    )

    log_loan_status_change(event)

    assert "reason=" not in caplog.records[-1].getMessage()


def test_log_loan_event_level(caplog):
    """Test that the level argument is honoured."""
    caplog.set_level(logging.INFO, logger="loan_lifecycle")

    log_loan_event(None, "use_case", level=logging.WARNING, operation="approve")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "loan_id=None" in record.getMessage()
    assert "operation='approve'" in record.getMessage()
