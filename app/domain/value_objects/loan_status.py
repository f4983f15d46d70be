"""Loan status value object and its transition table."""

from enum import Enum


class LoanStatus(str, Enum):
    """Lifecycle status of a loan."""

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    FUNDED = "funded"
    ACTIVE = "active"
    COMPLETED = "completed"
    DEFAULTED = "defaulted"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "LoanStatus") -> bool:
        return new_status in _ALLOWED_TRANSITIONS[self]

    def allowed_transitions(self) -> frozenset["LoanStatus"]:
        return _ALLOWED_TRANSITIONS[self]

    def is_active(self) -> bool:
        return self in _ACTIVE_STATUSES

    def is_final(self) -> bool:
        return self in _FINAL_STATUSES

    @property
    def label(self) -> str:
        return _LABELS[self]


_ALLOWED_TRANSITIONS: dict[LoanStatus, frozenset[LoanStatus]] = {
    LoanStatus.PENDING: frozenset({LoanStatus.UNDER_REVIEW, LoanStatus.CANCELLED}),
    LoanStatus.UNDER_REVIEW: frozenset(
        {LoanStatus.APPROVED, LoanStatus.REJECTED, LoanStatus.CANCELLED}
    ),
    LoanStatus.APPROVED: frozenset({LoanStatus.FUNDED}),
    LoanStatus.FUNDED: frozenset({LoanStatus.ACTIVE}),
    LoanStatus.ACTIVE: frozenset({LoanStatus.COMPLETED, LoanStatus.DEFAULTED}),
    LoanStatus.REJECTED: frozenset(),
    LoanStatus.COMPLETED: frozenset(),
    LoanStatus.DEFAULTED: frozenset(),
    LoanStatus.CANCELLED: frozenset(),
}

_ACTIVE_STATUSES = frozenset(
    {
        LoanStatus.PENDING,
        LoanStatus.UNDER_REVIEW,
        LoanStatus.APPROVED,
        LoanStatus.FUNDED,
        LoanStatus.ACTIVE,
    }
)

_FINAL_STATUSES = frozenset(
    {
        LoanStatus.COMPLETED,
        LoanStatus.REJECTED,
        LoanStatus.DEFAULTED,
        LoanStatus.CANCELLED,
    }
)

_LABELS = {
    LoanStatus.PENDING: "Pending",
    LoanStatus.UNDER_REVIEW: "Under review",
    LoanStatus.APPROVED: "Approved",
    LoanStatus.REJECTED: "Rejected",
    LoanStatus.FUNDED: "Funded",
    LoanStatus.ACTIVE: "Active",
    LoanStatus.COMPLETED: "Completed",
    LoanStatus.DEFAULTED: "Defaulted",
    LoanStatus.CANCELLED: "Cancelled",
}
