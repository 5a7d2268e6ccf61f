"""Application CQRS – EventSink, EventHandler, InProcessEventBus."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, TypeVar

from seat_reservations.kernel.ddd.domain_event import DomainEvent
from seat_reservations.observability.logging import get_logger

if TYPE_CHECKING:
    from seat_reservations.application.event_sourcing.store import EventStore

E = TypeVar("E", bound=DomainEvent)

logger = get_logger(__name__)


class EventSink(Protocol):
    """Port: receives every event a command produces.

    Implementations are responsible for appending the event after the
    existing history and for notifying read-side subscribers before the
    next query is served.
    """

    def publish(self, event: DomainEvent) -> None:
        """Accept *event* for storage and delivery."""
        ...


class CallableEventSink:
    """Adapts a plain ``callable(event)`` to the :class:`EventSink` port.

    Example::

        published: list[DomainEvent] = []
        sink = CallableEventSink(published.append)
    """

    def __init__(self, callback: Callable[[DomainEvent], Any]) -> None:
        self._callback = callback

    def publish(self, event: DomainEvent) -> None:
        self._callback(event)


class EventHandler(abc.ABC, Generic[E]):
    """Handle a single domain event type."""

    @abc.abstractmethod
    def handle(self, event: E) -> None: ...


class InProcessEventBus:
    """Event sink that appends to an :class:`EventStore` and then fans out.

    Handlers registered for the exact type of the event are called in
    registration order, after the event is durably part of the store.
    """

    def __init__(self, store: EventStore) -> None:
        self._store = store
        self._handlers: dict[type[DomainEvent], list[EventHandler[Any]]] = {}

    def register(
        self, event_type: type[DomainEvent], handler: EventHandler[Any]
    ) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def publish(self, event: DomainEvent) -> None:
        self._store.append(event)
        handlers = self._handlers.get(type(event), [])
        for handler in handlers:
            handler.handle(event)
        logger.debug(
            "event_published",
            event_type=event.event_type,
            event_id=event.event_id,
            subscribers=len(handlers),
        )


__all__ = [
    "CallableEventSink",
    "EventHandler",
    "EventSink",
    "InProcessEventBus",
]
