"""Event bus port."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.domain.events.loan_events import DomainEvent


class EventBus(ABC):
    """Port interface for publishing domain events."""

    @abstractmethod
    async def dispatch(self, event: DomainEvent) -> None:
        """
        Publish a single event.

        Handler failures must not propagate: by the time events are
        published the loan state is already saved.

        Args:
            event: Domain event to publish
        """
        pass

    async def dispatch_events(self, events: Iterable[DomainEvent]) -> None:
        """
        Publish events one by one, in order.

        Args:
            events: Domain events in emission order
        """
        for event in events:
            await self.dispatch(event)
