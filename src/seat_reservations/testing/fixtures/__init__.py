"""Testing fixtures – load with ``pytest_plugins = ["seat_reservations.testing.fixtures"]``."""
from seat_reservations.testing.fixtures.reservations import (
    event_store,
    recording_sink,
    reservation_settings,
    reservation_system,
)

__all__ = ["event_store", "recording_sink", "reservation_settings", "reservation_system"]
