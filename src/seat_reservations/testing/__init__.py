"""Testing support – fakes, builders, hypothesis strategies and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["seat_reservations.testing.fixtures"]
"""

from seat_reservations.testing.fakes import RecordingEventSink
from seat_reservations.testing.generators import (
    Builder,
    ReserveSeatsCommandBuilder,
    SeatReservedEventBuilder,
)

__all__ = [
    "Builder",
    "RecordingEventSink",
    "ReserveSeatsCommandBuilder",
    "SeatReservedEventBuilder",
]
