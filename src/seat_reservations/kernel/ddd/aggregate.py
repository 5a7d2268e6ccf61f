"""AggregateRoot — identity plus the events raised since the last save."""

from __future__ import annotations

from collections.abc import Hashable

from seat_reservations.kernel.ddd.domain_event import DomainEvent


class AggregateRoot:
    """Consistency boundary identified by ``id``.

    Two aggregates of the same type with the same id are equal, whatever
    their state.  ``version`` counts every event the aggregate has seen,
    replayed or raised.
    """

    def __init__(self, id: Hashable) -> None:  # noqa: A002
        self._id = id
        self._version = 0
        self._pending: list[DomainEvent] = []

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    def version(self) -> int:
        return self._version

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Events raised since the last :meth:`pull_events`, without clearing."""
        return tuple(self._pending)

    def _raise_event(self, event: DomainEvent) -> None:
        self._pending.append(event)
        self._version += 1

    def pull_events(self) -> list[DomainEvent]:
        """Return and clear pending domain events."""
        events, self._pending = self._pending, []
        return events

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r}, version={self._version})"


__all__ = ["AggregateRoot"]
