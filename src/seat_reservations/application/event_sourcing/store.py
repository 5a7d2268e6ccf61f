"""Application event sourcing – EventStore port and InMemoryEventStore."""

from __future__ import annotations

import abc
from collections import Counter
from collections.abc import Callable, Hashable, Iterable
from typing import Protocol

from seat_reservations.kernel.ddd.domain_event import DomainEvent
from seat_reservations.kernel.errors import OptimisticConcurrencyError
from seat_reservations.observability.logging import get_logger

logger = get_logger(__name__)

#: Filter applied to every stored event by :meth:`EventStore.query`.
EventPredicate = Callable[[DomainEvent], bool]


class HistoryProvider(Protocol):
    """Port: supplies the history of a single aggregate stream.

    ``load`` must return all and only the events of *aggregate_id*, in the
    order they were appended.
    """

    def load(self, aggregate_id: Hashable) -> list[DomainEvent]: ...


class EventStore(abc.ABC):
    """Port — append-only, totally ordered event log.

    Events are never mutated or removed once appended.  A stream is the
    subsequence of events sharing an :attr:`DomainEvent.aggregate_id`; its
    *version* is the number of events it holds.

    ``expected_version`` on :meth:`append` is an opt-in optimistic
    concurrency check:

    - ``None`` appends unconditionally (single writer).
    - An integer must equal the current version of the event's stream,
      otherwise :class:`OptimisticConcurrencyError` is raised and nothing
      is appended.
    """

    @abc.abstractmethod
    def append(self, event: DomainEvent, expected_version: int | None = None) -> int:
        """Append *event* to the end of the log and return its stream version."""

    @abc.abstractmethod
    def query(self, predicate: EventPredicate) -> list[DomainEvent]:
        """Return the events matching *predicate*, in append order."""

    @abc.abstractmethod
    def all_events(self) -> list[DomainEvent]:
        """Return a copy of the whole log, in append order."""

    @abc.abstractmethod
    def __len__(self) -> int: ...

    def load(self, aggregate_id: Hashable) -> list[DomainEvent]:
        """Return the stream of *aggregate_id* (satisfies :class:`HistoryProvider`)."""
        return self.query(lambda event: event.aggregate_id == aggregate_id)

    def version_of(self, aggregate_id: Hashable) -> int:
        """Return the number of events in the stream of *aggregate_id*."""
        return len(self.load(aggregate_id))


class InMemoryEventStore(EventStore):
    """List-backed :class:`EventStore` for tests and single-process use.

    An initial *history* is taken as already appended, in the given order.
    """

    def __init__(self, history: Iterable[DomainEvent] = ()) -> None:
        self._log: list[DomainEvent] = list(history)
        # aggregate_id → number of events in that stream
        self._versions: Counter[Hashable] = Counter(e.aggregate_id for e in self._log)

    def append(self, event: DomainEvent, expected_version: int | None = None) -> int:
        stream_id = event.aggregate_id
        actual_version = self._versions[stream_id]
        if expected_version is not None and actual_version != expected_version:
            logger.warning(
                "optimistic_concurrency_conflict",
                stream_id=stream_id,
                expected=expected_version,
                actual=actual_version,
            )
            raise OptimisticConcurrencyError(stream_id, expected_version, actual_version)
        self._log.append(event)
        self._versions[stream_id] = actual_version + 1
        logger.debug(
            "event_appended",
            event_type=event.event_type,
            stream_id=stream_id,
            stream_version=actual_version + 1,
            position=len(self._log),
        )
        return actual_version + 1

    def query(self, predicate: EventPredicate) -> list[DomainEvent]:
        return [e for e in self._log if predicate(e)]

    def all_events(self) -> list[DomainEvent]:
        return list(self._log)

    def version_of(self, aggregate_id: Hashable) -> int:
        return self._versions[aggregate_id]

    def __len__(self) -> int:
        return len(self._log)


__all__ = ["EventPredicate", "EventStore", "HistoryProvider", "InMemoryEventStore"]
