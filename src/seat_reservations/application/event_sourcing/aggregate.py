"""Application event sourcing – EventSourcedAggregate base class."""

from __future__ import annotations

import abc
from collections.abc import Hashable, Iterable
from typing import TypeVar

from seat_reservations.kernel.ddd.aggregate import AggregateRoot
from seat_reservations.kernel.ddd.domain_event import DomainEvent

A = TypeVar("A", bound="EventSourcedAggregate")


class EventSourcedAggregate(AggregateRoot, abc.ABC):
    """Aggregate root that reconstructs its state by replaying events.

    Subclasses implement :meth:`apply` to update their state for each event
    type, and change state in command methods only through
    :meth:`_record_that`, so that live changes and replay share one code path.

    Example::

        class Screening(EventSourcedAggregate):
            def __init__(self, id: int) -> None:
                super().__init__(id)
                self.seats: list[int] = []

            def apply(self, event: DomainEvent) -> None:
                if isinstance(event, SeatReserved):
                    self.seats.append(event.seat)

            def reserve(self, seat: int) -> None:
                self._record_that(SeatReserved(self.id, seat))
    """

    @abc.abstractmethod
    def apply(self, event: DomainEvent) -> None:
        """Update internal state from a single event.

        Called during replay — must **not** raise domain events.
        """

    @classmethod
    def from_history(cls: type[A], agg_id: Hashable, events: Iterable[DomainEvent]) -> A:
        """Left-fold *events* over a blank aggregate.

        The fold is deterministic and has no side effects: nothing is added
        to the pending events, and each replayed event bumps the version.
        """
        agg = cls(agg_id)
        for event in events:
            agg.apply(event)
            agg._version += 1  # noqa: SLF001
        return agg

    def _record_that(self, event: DomainEvent) -> None:
        """Apply a freshly decided *event* and queue it for publication."""
        self.apply(event)
        self._raise_event(event)


__all__ = ["EventSourcedAggregate"]
