"""Testing generators – builders for test data.

Hypothesis strategies live in :mod:`seat_reservations.testing.generators.strategies`
and are imported from there, so that this package works without hypothesis.
"""
from seat_reservations.testing.generators.builder import (
    Builder,
    ReserveSeatsCommandBuilder,
    SeatReservedEventBuilder,
)

__all__ = ["Builder", "ReserveSeatsCommandBuilder", "SeatReservedEventBuilder"]
