"""Reservations – write side.

``ReserveSeatsHandler`` rebuilds the screening from its history, asks it to
reserve the seats and publishes whatever event it raised.  A rejected
reservation is a normal outcome, reported as ``False`` with nothing published.
"""

from __future__ import annotations

import dataclasses

from seat_reservations.application.cqrs.commands import Command, CommandHandler
from seat_reservations.application.cqrs.events import EventSink
from seat_reservations.application.event_sourcing.store import HistoryProvider
from seat_reservations.application.reservations.repository import ScreeningRepository
from seat_reservations.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ReserveSeatsCommand(Command):
    """Request by *customer_id* for *seats* at *screening_id*; not yet validated."""

    screening_id: int
    customer_id: int
    seats: frozenset[int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "seats", frozenset(self.seats))


class ReserveSeatsHandler(CommandHandler[ReserveSeatsCommand]):
    def __init__(
        self,
        history: HistoryProvider,
        sink: EventSink,
        *,
        enforce_expected_version: bool = False,
    ) -> None:
        self._screenings = ScreeningRepository(
            history,
            sink,
            enforce_expected_version=enforce_expected_version,
        )

    def handle(self, command: ReserveSeatsCommand) -> bool:
        screening = self._screenings.load(command.screening_id)
        log = logger.bind(
            screening_id=command.screening_id,
            customer_id=command.customer_id,
            seats=sorted(command.seats),
        )

        if not screening.reserve_seats(command.seats, command.customer_id):
            log.info(
                "seat_reservation_rejected",
                conflicting_seats=screening.conflicting_seats(command.seats),
            )
            return False

        self._screenings.save(screening)
        log.info("seat_reservation_accepted")
        return True


__all__ = ["ReserveSeatsCommand", "ReserveSeatsHandler"]
