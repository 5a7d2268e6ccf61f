"""Reservations – ScreeningRepository."""

from __future__ import annotations

from seat_reservations.application.event_sourcing.repository import EventSourcedRepository
from seat_reservations.domain.screening import Screening


class ScreeningRepository(EventSourcedRepository[Screening]):
    """Loads screenings from their seat-reservation history."""

    def _aggregate_class(self) -> type[Screening]:
        return Screening


__all__ = ["ScreeningRepository"]
