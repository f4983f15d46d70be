"""Loan repository port."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.domain.entities.loan import Loan
from app.domain.value_objects.loan_status import LoanStatus


class LoanRepository(ABC):
    """
    Port interface for loan persistence.

    Implementations persist a loan's current state only. Loans read back
    carry an empty event buffer.
    """

    @abstractmethod
    async def save(self, loan: Loan) -> None:
        """
        Save a loan (insert or update by id).

        Args:
            loan: Loan aggregate to save

        Raises:
            LoanAlreadyExistsError: If another loan already uses the same number
        """
        pass

    @abstractmethod
    async def get(self, loan_id: UUID) -> Optional[Loan]:
        """
        Get a loan by id.

        Args:
            loan_id: Loan identifier

        Returns:
            Loan aggregate, or None if not found
        """
        pass

    @abstractmethod
    async def get_by_number(self, number: str) -> Optional[Loan]:
        """
        Get a loan by its human-readable number.

        Args:
            number: Loan number

        Returns:
            Loan aggregate, or None if not found
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> list[Loan]:
        """List all loans owned by a user."""
        pass

    @abstractmethod
    async def list_active_for_user(self, user_id: UUID) -> list[Loan]:
        """List a user's loans whose status is not final."""
        pass

    @abstractmethod
    async def list_by_status(self, status: LoanStatus) -> list[Loan]:
        """List all loans in a given status."""
        pass

    @abstractmethod
    async def list_pending(self) -> list[Loan]:
        """List loans waiting for review."""
        pass

    @abstractmethod
    async def list(self) -> list[Loan]:
        """
        List all loans.

        Returns:
            List of all loans in insertion order
        """
        pass

    @abstractmethod
    def next_identity(self) -> UUID:
        """
        Allocate a new loan identity.

        Returns:
            Fresh unique loan id
        """
        pass
