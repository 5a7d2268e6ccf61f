"""Reservations – commands, queries and the read model for seat reservations."""

from seat_reservations.application.reservations.commands import (
    ReserveSeatsCommand,
    ReserveSeatsHandler,
)
from seat_reservations.application.reservations.queries import (
    MyReservedSeatsHandler,
    MyReservedSeatsQuery,
)
from seat_reservations.application.reservations.read_model import ReservedSeatsReadModel
from seat_reservations.application.reservations.repository import ScreeningRepository

__all__ = [
    "MyReservedSeatsHandler",
    "MyReservedSeatsQuery",
    "ReserveSeatsCommand",
    "ReserveSeatsHandler",
    "ReservedSeatsReadModel",
    "ScreeningRepository",
]
