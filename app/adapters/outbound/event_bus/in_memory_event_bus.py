"""In-process event bus adapter."""

import logging
from collections.abc import Callable

from app.application.ports.event_bus import EventBus
from app.domain.events.loan_events import DomainEvent
from app.infrastructure.logging.logger import log_loan_event

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventBus(EventBus):
    """Synchronous in-process implementation of the event bus."""

    def __init__(self) -> None:
        """Initialize event bus with no subscribers."""
        self._subscriptions: list[tuple[type[DomainEvent], EventHandler]] = []
        self._published: list[DomainEvent] = []

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Register a handler for an event type and its subclasses.

        Args:
            event_type: Event class to listen to
            handler: Callable invoked with each matching event
        """
        self._subscriptions.append((event_type, handler))

    async def dispatch(self, event: DomainEvent) -> None:
        """
        Publish an event to every matching handler, in subscription order.

        A failing handler is logged and skipped; the remaining handlers
        still receive the event and the caller sees no error.

        Args:
            event: Domain event to publish
        """
        self._published.append(event)
        for event_type, handler in self._subscriptions:
            if not isinstance(event, event_type):
                continue
            try:
                handler(event)
            except Exception as e:
                log_loan_event(
                    getattr(event, "loan_id", None),
                    "event_bus",
                    level=logging.ERROR,
                    event_name=event.event_name,
                    handler=getattr(handler, "__name__", repr(handler)),
                    error_type=type(e).__name__,
                    error=str(e),
                )

    @property
    def published(self) -> list[DomainEvent]:
        """Events published so far, in order."""
        return list(self._published)
