"""Application CQRS – Commands, Queries, Events, Buses."""
from seat_reservations.application.cqrs.commands import (
    Command,
    CommandBus,
    CommandHandler,
    InProcessCommandBus,
)
from seat_reservations.application.cqrs.events import (
    CallableEventSink,
    EventHandler,
    EventSink,
    InProcessEventBus,
)
from seat_reservations.application.cqrs.queries import (
    InProcessQueryBus,
    Query,
    QueryBus,
    QueryHandler,
)
from seat_reservations.application.cqrs.registry import HandlerRegistry

__all__ = [
    "CallableEventSink",
    "Command", "CommandBus", "CommandHandler", "InProcessCommandBus",
    "EventHandler", "EventSink", "HandlerRegistry", "InProcessEventBus",
    "InProcessQueryBus", "Query", "QueryBus", "QueryHandler",
]
