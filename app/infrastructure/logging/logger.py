"""Structured logger for loan lifecycle observability."""

import logging
from typing import Any, Optional

from app.infrastructure.config.settings import settings

_logger = logging.getLogger("loan_lifecycle")
_logger.setLevel(logging.DEBUG if settings.debug_mode else settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_loan_event(
    loan_id: Any,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a loan.

    Args:
        loan_id: Loan identifier
        component: Component name (e.g., 'use_case', 'listener', 'calculator')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "loan_id": str(loan_id) if loan_id is not None else None,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_loan_created(
    loan_id: Any,
    user_id: Any,
    loan_number: str,
    **kwargs: Any,
) -> None:
    """
    Log loan application creation.

    Args:
        loan_id: Loan identifier
        user_id: Owning user identifier
        loan_number: Human-readable loan number
        **kwargs: Additional fields
    """
    log_loan_event(
        loan_id,
        component=kwargs.pop("component", "loan"),
        user_id=str(user_id),
        loan_number=loan_number,
        **kwargs,
    )


def log_status_transition(
    loan_id: Any,
    previous_status: Optional[str],
    new_status: str,
    **kwargs: Any,
) -> None:
    """
    Log loan status transition.

    Args:
        loan_id: Loan identifier
        previous_status: Status before the transition
        new_status: Status after the transition
        **kwargs: Additional fields
    """
    log_loan_event(
        loan_id,
        component=kwargs.pop("component", "lifecycle"),
        status_before=previous_status,
        status_after=new_status,
        **kwargs,
    )


logger = _logger
