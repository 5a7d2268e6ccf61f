"""Domain – screening aggregate and its events."""

from seat_reservations.domain.events import SeatReservedEvent
from seat_reservations.domain.screening import ReservedSeat, Screening

__all__ = ["ReservedSeat", "Screening", "SeatReservedEvent"]
