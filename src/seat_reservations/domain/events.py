"""Domain – events raised by the screening aggregate."""

from __future__ import annotations

import dataclasses

from seat_reservations.kernel.ddd.domain_event import DomainEvent


@dataclasses.dataclass(frozen=True)
class SeatReservedEvent(DomainEvent):
    """Seats reserved by one customer for one screening, in one transaction.

    Equality is structural: same screening, same customer and the same seats
    in the same order.  ``seats`` is stored as a tuple whatever iterable is
    passed in.
    """

    screening_id: int
    customer_id: int
    seats: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "seats", tuple(self.seats))

    @property
    def aggregate_id(self) -> int:
        return self.screening_id


__all__ = ["SeatReservedEvent"]
