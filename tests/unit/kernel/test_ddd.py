"""Unit tests for kernel DDD building blocks."""

from __future__ import annotations

import dataclasses

import pytest

from seat_reservations.kernel.ddd import AggregateRoot, DomainEvent


@dataclasses.dataclass(frozen=True)
class Pinged(DomainEvent):
    target: int


class Counter(AggregateRoot):
    def ping(self, target: int) -> None:
        self._raise_event(Pinged(target))


class OtherCounter(AggregateRoot):
    pass


class TestDomainEvent:
    def test_event_type_is_class_name(self) -> None:
        assert Pinged(1).event_type == "Pinged"

    def test_metadata_is_generated(self) -> None:
        event = Pinged(1)
        assert event.event_id
        assert event.occurred_at.tzinfo is not None

    def test_metadata_excluded_from_equality(self) -> None:
        a, b = Pinged(1), Pinged(1)
        assert a.event_id != b.event_id
        assert a == b
        assert hash(a) == hash(b)

    def test_payload_drives_equality(self) -> None:
        assert Pinged(1) != Pinged(2)

    def test_metadata_is_keyword_only(self) -> None:
        event = Pinged(1, event_id="fixed")
        assert event.event_id == "fixed"

    def test_default_aggregate_id_is_none(self) -> None:
        assert Pinged(1).aggregate_id is None

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Pinged(1).target = 2  # type: ignore[misc]


class TestAggregateRoot:
    def test_equality_by_type_and_id(self) -> None:
        assert Counter(1) == Counter(1)
        assert Counter(1) != Counter(2)
        assert Counter(1) != OtherCounter(1)
        assert hash(Counter(1)) == hash(Counter(1))

    def test_state_does_not_affect_equality(self) -> None:
        busy = Counter(1)
        busy.ping(3)
        assert busy == Counter(1)

    def test_raise_event_bumps_version(self) -> None:
        agg = Counter(1)
        agg.ping(5)
        agg.ping(6)
        assert agg.version == 2
        assert agg.pending_events == (Pinged(5), Pinged(6))

    def test_pull_events_clears_pending(self) -> None:
        agg = Counter(1)
        agg.ping(5)
        assert agg.pull_events() == [Pinged(5)]
        assert agg.pull_events() == []
        assert agg.pending_events == ()
        assert agg.version == 1
