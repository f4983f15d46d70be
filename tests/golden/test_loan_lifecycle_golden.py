"""Golden tests for the full loan lifecycle."""

from uuid import uuid4

import pytest

from app.application.dtos.loan import CreateLoanApplicationCommand
from app.domain.entities.loan import Loan
from app.domain.events.loan_events import LoanApplicationCreated, LoanStatusChanged
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.loan_status import LoanStatus
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount
from app.infrastructure.wiring.container import Container

HAPPY_PATH = [
    LoanStatus.PENDING,
    LoanStatus.UNDER_REVIEW,
    LoanStatus.APPROVED,
    LoanStatus.FUNDED,
    LoanStatus.ACTIVE,
    LoanStatus.COMPLETED,
]


def test_aggregate_happy_path():
    """Golden: personal loan from application to completion on the aggregate."""
    loan = Loan.create(
        loan_id=uuid4(),
        user_id=uuid4(),
        number="DOC17298432001234",
        loan_type=LoanType.PERSONAL,
        amount=Amount(15000.0),
        duration=Duration(36),
    )
    statuses = [loan.status]

    for operation in (
        loan.start_review,
        loan.approve,
        loan.fund,
        loan.activate,
        loan.complete,
    ):
        operation()
        statuses.append(loan.status)
        assert len(loan.uncommitted_events) == len(statuses)

    assert statuses == HAPPY_PATH
    events = loan.uncommitted_events
    assert isinstance(events[0], LoanApplicationCreated)
    assert all(isinstance(e, LoanStatusChanged) for e in events[1:])
    assert [e.new_status for e in events[1:]] == HAPPY_PATH[1:]
    assert loan.is_final() is True
    assert loan.available_transitions() == frozenset()

    loan.mark_events_committed()
    assert loan.uncommitted_events == []


@pytest.mark.asyncio
async def test_service_happy_path():
    """Golden: the same lifecycle driven through the wired use cases."""
    container = Container()

    view = await container.create_loan_application.execute(
        CreateLoanApplicationCommand(
            user_id=uuid4(),
            loan_type=LoanType.PERSONAL,
            amount=15000.0,
            duration_months=36,
        )
    )
    statuses = [view.status]
    for use_case in (
        container.start_loan_review,
        container.approve_loan,
        container.fund_loan,
        container.activate_loan,
        container.complete_loan,
    ):
        view = await use_case.execute(view.id)
        statuses.append(view.status)

    assert statuses == HAPPY_PATH
    assert view.approved_at is not None
    assert view.funded_at is not None
    assert view.available_transitions == []

    published = container.event_bus.published
    assert len(published) == 6
    assert [e.event_name for e in published] == [
        "loan.application.created",
        *["loan.status.changed"] * 5,
    ]

    stats = await container.get_loan_statistics.execute()
    assert stats.completion_rate == 100.0
    assert stats.approval_rate == 100.0


@pytest.mark.asyncio
async def test_service_rejection_path():
    """Golden: an application reviewed and rejected with a reason."""
    container = Container()

    view = await container.create_loan_application.execute(
        CreateLoanApplicationCommand(
            user_id=uuid4(),
            loan_type=LoanType.BUSINESS,
            amount=250000.0,
            duration_months=120,
            project_description="Second warehouse",
        )
    )
    await container.start_loan_review.execute(view.id)
    view = await container.reject_loan.execute(view.id, reason="Collateral missing")

    assert view.status is LoanStatus.REJECTED
    assert view.status_label == "Rejected"
    assert view.rejection_reason == "Collateral missing"
    assert container.event_bus.published[-1].reason == "Collateral missing"
