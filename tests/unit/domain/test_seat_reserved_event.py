"""Unit tests for SeatReservedEvent."""

from __future__ import annotations

import dataclasses

import pytest

from seat_reservations.domain import SeatReservedEvent


class TestSeatReservedEvent:
    def test_fields(self) -> None:
        event = SeatReservedEvent(1, 2, [3, 4])
        assert event.screening_id == 1
        assert event.customer_id == 2
        assert event.seats == (3, 4)

    def test_seats_normalised_to_tuple(self) -> None:
        assert SeatReservedEvent(1, 2, iter([5, 4])).seats == (5, 4)

    def test_aggregate_id_is_screening_id(self) -> None:
        assert SeatReservedEvent(9, 2, [1]).aggregate_id == 9

    def test_structural_equality(self) -> None:
        assert SeatReservedEvent(1, 3, [7, 8]) == SeatReservedEvent(1, 3, (7, 8))

    def test_seat_order_matters(self) -> None:
        assert SeatReservedEvent(1, 3, [7, 8]) != SeatReservedEvent(1, 3, [8, 7])

    @pytest.mark.parametrize(
        "other",
        [
            SeatReservedEvent(2, 3, [7, 8]),
            SeatReservedEvent(1, 4, [7, 8]),
            SeatReservedEvent(1, 3, [7]),
        ],
    )
    def test_any_field_difference_breaks_equality(self, other: SeatReservedEvent) -> None:
        assert SeatReservedEvent(1, 3, [7, 8]) != other

    def test_hashable(self) -> None:
        events = {SeatReservedEvent(1, 3, [7, 8]), SeatReservedEvent(1, 3, [7, 8])}
        assert len(events) == 1

    def test_immutable(self) -> None:
        event = SeatReservedEvent(1, 3, [7, 8])
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.seats = (1,)  # type: ignore[misc]
