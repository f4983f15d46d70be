"""Loan repository adapters."""

from app.adapters.outbound.loan.in_memory_loan_repository import InMemoryLoanRepository

__all__ = [
    "InMemoryLoanRepository",
]
