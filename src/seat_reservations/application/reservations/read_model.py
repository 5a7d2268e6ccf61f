"""Reservations – per-customer read model.

Seats are keyed by customer only; reservations a customer holds at
different screenings end up in the same list.
"""

from __future__ import annotations

from collections.abc import Iterable

from seat_reservations.application.event_sourcing.projector import Projector
from seat_reservations.domain.events import SeatReservedEvent
from seat_reservations.kernel.ddd.domain_event import DomainEvent
from seat_reservations.kernel.errors import CustomerReservationsNotFoundError
from seat_reservations.observability.logging import get_logger

logger = get_logger(__name__)


class ReservedSeatsReadModel(Projector):
    """Maps each customer to every seat they reserved, in event order."""

    def __init__(self) -> None:
        self._reservations: dict[int, list[int]] = {}

    @classmethod
    def from_events(cls, events: Iterable[DomainEvent]) -> "ReservedSeatsReadModel":
        """Build a fresh read model by folding *events* in order."""
        read_model = cls()
        read_model.project_all(events)
        return read_model

    def project(self, event: DomainEvent) -> None:
        if not isinstance(event, SeatReservedEvent):
            return
        self._reservations.setdefault(event.customer_id, []).extend(event.seats)
        logger.debug(
            "read_model_projected",
            customer_id=event.customer_id,
            seats=list(event.seats),
        )

    def reservations_for_customer(self, customer_id: int) -> list[int]:
        """Return a copy of the seats reserved by *customer_id*.

        Raises :class:`CustomerReservationsNotFoundError` (a ``LookupError``)
        when the customer has never reserved anything.
        """
        try:
            return list(self._reservations[customer_id])
        except KeyError:
            raise CustomerReservationsNotFoundError(customer_id) from None

    def has_reservations(self, customer_id: int) -> bool:
        return customer_id in self._reservations

    def customers(self) -> list[int]:
        """Known customer ids, in the order they first reserved."""
        return list(self._reservations)


__all__ = ["ReservedSeatsReadModel"]
