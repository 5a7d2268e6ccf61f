"""Application event sourcing – EventSourcedRepository."""

from __future__ import annotations

import abc
from collections.abc import Hashable
from typing import Generic, TypeVar

from seat_reservations.application.cqrs.events import EventSink
from seat_reservations.application.event_sourcing.aggregate import EventSourcedAggregate
from seat_reservations.application.event_sourcing.store import HistoryProvider
from seat_reservations.kernel.ddd.domain_event import DomainEvent
from seat_reservations.kernel.errors import OptimisticConcurrencyError
from seat_reservations.observability.logging import get_logger

T = TypeVar("T", bound=EventSourcedAggregate)

logger = get_logger(__name__)


class EventSourcedRepository(Generic[T], abc.ABC):
    """Generic repository for event-sourced aggregates.

    Reads go to a :class:`HistoryProvider`; writes go to an
    :class:`EventSink`.  Subclasses only name the aggregate type.

    Example::

        class ScreeningRepository(EventSourcedRepository[Screening]):
            def _aggregate_class(self) -> type[Screening]:
                return Screening

        repo = ScreeningRepository(history=store, sink=bus)
        screening = repo.load(1)
        screening.reserve_seats({7, 8}, customer_id=3)
        repo.save(screening)

    With ``enforce_expected_version`` set, :meth:`save` re-reads the stream
    version and raises :class:`OptimisticConcurrencyError` if another writer
    appended to it after :meth:`load`.
    """

    def __init__(
        self,
        history: HistoryProvider,
        sink: EventSink,
        *,
        enforce_expected_version: bool = False,
    ) -> None:
        self._history = history
        self._sink = sink
        self._enforce_expected_version = enforce_expected_version

    @abc.abstractmethod
    def _aggregate_class(self) -> type[T]:
        """Return the concrete aggregate type."""

    def load(self, agg_id: Hashable) -> T:
        """Rebuild the aggregate from its full history (empty history is valid)."""
        cls = self._aggregate_class()
        events = self._history.load(agg_id)
        agg = cls.from_history(agg_id, events)
        logger.debug(
            "aggregate_rehydrated",
            aggregate_type=cls.__name__,
            aggregate_id=agg_id,
            events_replayed=len(events),
        )
        return agg

    def save(self, agg: T) -> list[DomainEvent]:
        """Publish pending events to the sink and return them."""
        events = agg.pull_events()
        if not events:
            return []

        if self._enforce_expected_version:
            expected = agg.version - len(events)
            actual = len(self._history.load(agg.id))
            if actual != expected:
                logger.warning(
                    "optimistic_concurrency_conflict",
                    stream_id=agg.id,
                    expected=expected,
                    actual=actual,
                )
                raise OptimisticConcurrencyError(agg.id, expected, actual)

        for event in events:
            self._sink.publish(event)
        return events


__all__ = ["EventSourcedRepository"]
