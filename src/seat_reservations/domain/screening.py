"""Domain – the Screening aggregate.

A screening knows only which seats are reserved and by whom.  Each seat is
either free or reserved by one customer; there is no cancellation, so
later events can never free a seat reserved by an earlier one.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable

from seat_reservations.application.event_sourcing.aggregate import EventSourcedAggregate
from seat_reservations.domain.events import SeatReservedEvent
from seat_reservations.kernel.ddd.domain_event import DomainEvent


@dataclasses.dataclass(frozen=True, slots=True)
class ReservedSeat:
    """One seat held by one customer."""

    customer_id: int
    seat_number: int


def _in_request_order(seats: Iterable[int]) -> tuple[int, ...]:
    """Unordered collections are sorted; sequences keep their order, minus repeats."""
    if isinstance(seats, (set, frozenset)):
        return tuple(sorted(seats))
    return tuple(dict.fromkeys(seats))


class Screening(EventSourcedAggregate):
    """Reservation state of a single screening, rebuilt from its history.

    Example::

        screening = Screening.from_history(1, store.load(1))
        if screening.reserve_seats({7, 8}, customer_id=3):
            for event in screening.pull_events():
                sink.publish(event)
    """

    def __init__(self, id: int) -> None:  # noqa: A002
        super().__init__(id)
        self._reserved_seats: list[ReservedSeat] = []

    # ── Event application ─────────────────────────────

    def _apply_seat_reserved(self, event: SeatReservedEvent) -> None:
        for seat_number in event.seats:
            self._reserved_seats.append(ReservedSeat(event.customer_id, seat_number))

    def apply(self, event: DomainEvent) -> None:
        handler: Callable[..., None] | None = {
            SeatReservedEvent: self._apply_seat_reserved,
        }.get(type(event))
        if handler:
            handler(event)

    # ── Commands ──────────────────────────────────────

    def reserve_seats(self, seats: Iterable[int], customer_id: int) -> bool:
        """Reserve every seat in *seats* for *customer_id*, or none of them.

        Returns ``False`` without raising any event when at least one seat is
        already reserved, by anyone.  Otherwise records a single
        :class:`SeatReservedEvent` carrying the whole request and returns
        ``True``.
        """
        requested = _in_request_order(seats)
        if self.conflicting_seats(requested):
            return False
        self._record_that(SeatReservedEvent(self.id, customer_id, requested))
        return True

    # ── Inspection ────────────────────────────────────

    def conflicting_seats(self, seats: Iterable[int]) -> list[int]:
        """Return, in ascending order, the seats of *seats* already reserved."""
        taken = self.reserved_seat_numbers()
        return sorted(taken.intersection(seats))

    def reserved_seat_numbers(self) -> frozenset[int]:
        return frozenset(rs.seat_number for rs in self._reserved_seats)

    def is_reserved(self, seat_number: int) -> bool:
        return any(rs.seat_number == seat_number for rs in self._reserved_seats)

    def seats_of(self, customer_id: int) -> list[int]:
        """Seats held by *customer_id*, in the order they were reserved."""
        return [rs.seat_number for rs in self._reserved_seats if rs.customer_id == customer_id]

    @property
    def reserved_seats(self) -> tuple[ReservedSeat, ...]:
        return tuple(self._reserved_seats)


__all__ = ["ReservedSeat", "Screening"]
