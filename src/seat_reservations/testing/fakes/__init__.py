"""Testing fakes – in-memory doubles for application ports."""
from seat_reservations.testing.fakes.event_sink import RecordingEventSink

__all__ = ["RecordingEventSink"]
