"""Loan number generator port."""

from abc import ABC, abstractmethod


class LoanNumberGenerator(ABC):
    """Port interface for generating human-readable loan numbers."""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a loan number.

        Returns:
            New loan number
        """
        pass
