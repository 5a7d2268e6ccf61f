"""Application — Event Sourcing."""

from seat_reservations.application.event_sourcing.aggregate import EventSourcedAggregate
from seat_reservations.application.event_sourcing.projector import Projector
from seat_reservations.application.event_sourcing.repository import EventSourcedRepository
from seat_reservations.application.event_sourcing.store import (
    EventPredicate,
    EventStore,
    HistoryProvider,
    InMemoryEventStore,
)

__all__ = [
    "EventPredicate",
    "EventSourcedAggregate",
    "EventSourcedRepository",
    "EventStore",
    "HistoryProvider",
    "InMemoryEventStore",
    "Projector",
]
