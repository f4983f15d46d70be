"""Unit tests for InMemoryLoanRepository."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from app.adapters.outbound.loan import InMemoryLoanRepository
from app.domain.entities.loan import Loan
from app.domain.exceptions import LoanAlreadyExistsError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.loan_status import LoanStatus
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount


def new_loan(user_id=None, number: str = "DOC00000000011111") -> Loan:
    return Loan.create(
        loan_id=uuid4(),
        user_id=user_id or uuid4(),
        number=number,
        loan_type=LoanType.RENOVATION,
        amount=Amount(25000.0),
        duration=Duration(60),
        project_description="Roof",
    )


class TestInMemoryLoanRepository:
    """Test cases for InMemoryLoanRepository."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.repository = InMemoryLoanRepository()

    @pytest.mark.asyncio
    async def test_save_and_get(self) -> None:
        """Test that a saved loan is read back with the same state."""
        loan = new_loan()
        loan.start_review()
        loan.reject("Incomplete file")

        await self.repository.save(loan)
        stored = await self.repository.get(loan.id)

        assert stored is not None
        assert stored is not loan
        assert stored.id == loan.id
        assert stored.number == loan.number
        assert stored.loan_type is LoanType.RENOVATION
        assert stored.amount == loan.amount
        assert stored.duration == loan.duration
        assert stored.interest_rate == loan.interest_rate
        assert stored.status is LoanStatus.REJECTED
        assert stored.project_description == "Roof"
        assert stored.review_started_at == loan.review_started_at
        assert stored.rejection_reason == "Incomplete file"

    @pytest.mark.asyncio
    async def test_loaded_loan_has_no_events(self) -> None:
        """Test that loading never replays recorded events."""
        loan = new_loan()
        await self.repository.save(loan)

        stored = await self.repository.get(loan.id)

        assert stored.uncommitted_events == []
        assert len(loan.uncommitted_events) == 1

    @pytest.mark.asyncio
    async def test_stored_state_is_isolated(self) -> None:
        """Test that changing a loaded loan does not change the store."""
        loan = new_loan()
        await self.repository.save(loan)

        stored = await self.repository.get(loan.id)
        stored.cancel()

        assert (await self.repository.get(loan.id)).status is LoanStatus.PENDING

    @pytest.mark.asyncio
    async def test_save_updates_existing(self) -> None:
        """Test that saving again replaces the stored state."""
        loan = new_loan()
        await self.repository.save(loan)
        loan.start_review()
        await self.repository.save(loan)

        assert (await self.repository.get(loan.id)).status is LoanStatus.UNDER_REVIEW
        assert len(await self.repository.list()) == 1

    @pytest.mark.asyncio
    async def test_duplicate_number_is_refused(self) -> None:
        """Test that two loans cannot share a number."""
        await self.repository.save(new_loan(number="DOC00000000011111"))

        with pytest.raises(LoanAlreadyExistsError):
            await self.repository.save(new_loan(number="DOC00000000011111"))

    @pytest.mark.asyncio
    async def test_get_missing(self) -> None:
        """Test that unknown ids and numbers return None."""
        assert await self.repository.get(uuid4()) is None
        assert await self.repository.get_by_number("DOC404") is None

    @pytest.mark.asyncio
    async def test_get_by_number(self) -> None:
        """Test lookup by loan number."""
        loan = new_loan(number="DOC00000000022222")
        await self.repository.save(loan)

        stored = await self.repository.get_by_number("DOC00000000022222")

        assert stored.id == loan.id

    @pytest.mark.asyncio
    async def test_finders(self) -> None:
        """Test user, active and status based listings."""
        user_id = uuid4()
        pending = new_loan(user_id, "DOC00000000000001")
        cancelled = new_loan(user_id, "DOC00000000000002")
        cancelled.cancel()
        other = new_loan(None, "DOC00000000000003")
        other.start_review()
        for loan in (pending, cancelled, other):
            await self.repository.save(loan)

        by_user = await self.repository.list_by_user(user_id)
        active = await self.repository.list_active_for_user(user_id)
        under_review = await self.repository.list_by_status(LoanStatus.UNDER_REVIEW)
        waiting = await self.repository.list_pending()
        everything = await self.repository.list()

        assert [loan.id for loan in by_user] == [pending.id, cancelled.id]
        assert [loan.id for loan in active] == [pending.id]
        assert [loan.id for loan in under_review] == [other.id]
        assert [loan.id for loan in waiting] == [pending.id]
        assert len(everything) == 3

    def test_next_identity_is_unique(self) -> None:
        """Test that generated identities differ."""
        assert self.repository.next_identity() != self.repository.next_identity()

    @pytest.mark.asyncio
    async def test_timestamps_round_trip(self) -> None:
        """Test that lifecycle timestamps are kept."""
        loan = new_loan()
        loan.start_review()
        loan.approve()
        loan.fund()
        await self.repository.save(loan)

        stored = await self.repository.get(loan.id)

        assert stored.approved_at == loan.approved_at
        assert stored.funded_at == loan.funded_at
        assert stored.created_at.tzinfo == timezone.utc
        assert isinstance(stored.created_at, datetime)
