"""Testing fixtures – event stores, sinks and a wired reservation system."""
from __future__ import annotations

import pytest

from seat_reservations.application.event_sourcing import InMemoryEventStore
from seat_reservations.bootstrap import ReservationSystem, bootstrap
from seat_reservations.config import ReservationSettings
from seat_reservations.testing.fakes import RecordingEventSink


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def recording_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def reservation_settings() -> ReservationSettings:
    return ReservationSettings(log_level="DEBUG", json_logs=False)


@pytest.fixture
def reservation_system(reservation_settings: ReservationSettings) -> ReservationSystem:
    return bootstrap(settings=reservation_settings)


__all__ = ["event_store", "recording_sink", "reservation_settings", "reservation_system"]
