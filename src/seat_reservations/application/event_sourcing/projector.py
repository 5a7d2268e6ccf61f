"""Application event sourcing – Projector abstract base class."""

from __future__ import annotations

import abc
from collections.abc import Iterable

from seat_reservations.application.cqrs.events import EventHandler
from seat_reservations.kernel.ddd.domain_event import DomainEvent


class Projector(EventHandler[DomainEvent], abc.ABC):
    """Folds a stream of events into a read model.

    A projector can be built once from a full history with
    :meth:`project_all`, or registered on an event bus, where
    :meth:`handle` keeps it up to date one event at a time.
    """

    @abc.abstractmethod
    def project(self, event: DomainEvent) -> None:
        """Process a single event and update the read model."""

    def project_all(self, events: Iterable[DomainEvent]) -> None:
        """Process *events* in order."""
        for event in events:
            self.project(event)

    def handle(self, event: DomainEvent) -> None:
        self.project(event)


__all__ = ["Projector"]
