"""
Event Bus Implementation (Infrastructure Layer).

Dispatches published events to in-process subscribers.
"""
import logging
from typing import Callable, List, Optional
import asyncio

from core.domain.event_bus import EventBus
from core.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Subscribers may be plain callables or coroutine functions. A failing
    subscriber is logged and does not stop delivery to the others.
    """

    def __init__(self):
        self._subscribers: List[Callable[[DomainEvent], None]] = []
        self.published: List[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        self.published.append(event)
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        if not events:
            return

        logger.debug(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, handler: Callable[[DomainEvent], None]) -> None:
        """
        Subscribe to all domain events.

        Args:
            handler: Callback function that receives events
        """
        if handler not in self._subscribers:
            self._subscribers.append(handler)
        logger.info(f"Registered event subscriber: {handler.__name__}")

    def unsubscribe(self, handler: Callable[[DomainEvent], None]) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)
        logger.info(f"Unregistered event subscriber: {handler.__name__}")

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        for subscriber in list(self._subscribers):
            try:
                if asyncio.iscoroutinefunction(subscriber):
                    await subscriber(event)
                else:
                    subscriber(event)
            except Exception as e:
                logger.error(f"Subscriber {subscriber.__name__} failed: {e}", exc_info=True)


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
