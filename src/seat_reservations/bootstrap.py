"""Composition root – wires the store, buses, handlers and read model.

Usage::

    system = bootstrap(history=[SeatReservedEvent(1, 1, [1, 2, 3])])
    system.handle(ReserveSeatsCommand(1, 1, {4, 5}))     # True
    system.execute(MyReservedSeatsQuery(1))              # [1, 2, 3, 4, 5]
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from seat_reservations.application.cqrs import (
    InProcessCommandBus,
    InProcessEventBus,
    InProcessQueryBus,
)
from seat_reservations.application.event_sourcing import EventStore, InMemoryEventStore
from seat_reservations.application.reservations import (
    MyReservedSeatsHandler,
    MyReservedSeatsQuery,
    ReservedSeatsReadModel,
    ReserveSeatsCommand,
    ReserveSeatsHandler,
)
from seat_reservations.config import ReservationSettings
from seat_reservations.domain import SeatReservedEvent
from seat_reservations.kernel.ddd import DomainEvent
from seat_reservations.observability.logging import LoggerFactory


class ReservationSystem:
    """Client-facing API: ``handle`` commands and ``execute`` queries.

    The read model is folded from the store once at construction and then
    kept current by the event bus, which appends every published event to
    the store before notifying it.
    """

    def __init__(self, store: EventStore, settings: ReservationSettings) -> None:
        self._store = store
        self._settings = settings
        self._event_bus = InProcessEventBus(store)

        self._read_model = ReservedSeatsReadModel.from_events(store.all_events())
        self._event_bus.register(SeatReservedEvent, self._read_model)

        self._command_bus = InProcessCommandBus()
        self._command_bus.register(
            ReserveSeatsCommand,
            ReserveSeatsHandler(
                store,
                self._event_bus,
                enforce_expected_version=settings.enforce_expected_version,
            ),
        )
        self._query_bus = InProcessQueryBus()
        self._query_bus.register(MyReservedSeatsQuery, MyReservedSeatsHandler(self._read_model))

    def handle(self, command: ReserveSeatsCommand) -> Any:
        return self._command_bus.dispatch(command)

    def execute(self, query: MyReservedSeatsQuery) -> Any:
        return self._query_bus.ask(query)

    @property
    def history(self) -> list[DomainEvent]:
        """Snapshot of the full event log, in append order."""
        return self._store.all_events()

    @property
    def read_model(self) -> ReservedSeatsReadModel:
        return self._read_model

    @property
    def settings(self) -> ReservationSettings:
        return self._settings


def bootstrap(
    history: Iterable[DomainEvent] = (),
    settings: ReservationSettings | None = None,
    *,
    configure_logging: bool = False,
) -> ReservationSystem:
    """Build a :class:`ReservationSystem` over an in-memory store seeded with *history*.

    *settings* default to the ``SEAT_RESERVATIONS_*`` environment variables.
    Logging is left alone unless *configure_logging* is set.
    """
    if settings is None:
        settings = ReservationSettings.from_env()
    if configure_logging:
        LoggerFactory.configure(settings.level, json_logs=settings.json_logs)
    return ReservationSystem(InMemoryEventStore(history), settings)


__all__ = ["ReservationSystem", "bootstrap"]
