"""Unit tests for ReservedSeatsReadModel."""

from __future__ import annotations

import dataclasses

import pytest

from seat_reservations.application.reservations import ReservedSeatsReadModel
from seat_reservations.domain import SeatReservedEvent
from seat_reservations.kernel.ddd import DomainEvent
from seat_reservations.kernel.errors import CustomerReservationsNotFoundError


@dataclasses.dataclass(frozen=True)
class ScreeningScheduled(DomainEvent):
    screening_id: int


class TestReservedSeatsReadModel:
    def test_folds_seats_per_customer(self) -> None:
        read_model = ReservedSeatsReadModel.from_events(
            [
                SeatReservedEvent(1, 1, [1, 2, 3]),
                SeatReservedEvent(1, 2, [4, 5, 6]),
            ]
        )
        assert read_model.reservations_for_customer(1) == [1, 2, 3]
        assert read_model.reservations_for_customer(2) == [4, 5, 6]

    def test_appends_in_event_order(self) -> None:
        read_model = ReservedSeatsReadModel.from_events(
            [
                SeatReservedEvent(1, 1, [9, 3]),
                SeatReservedEvent(1, 2, [1]),
                SeatReservedEvent(1, 1, [5, 4]),
            ]
        )
        assert read_model.reservations_for_customer(1) == [9, 3, 5, 4]

    def test_screenings_are_merged_per_customer(self) -> None:
        read_model = ReservedSeatsReadModel.from_events(
            [
                SeatReservedEvent(1, 1, [1, 2]),
                SeatReservedEvent(2, 1, [1, 2]),
            ]
        )
        assert read_model.reservations_for_customer(1) == [1, 2, 1, 2]

    def test_unknown_customer_raises(self) -> None:
        read_model = ReservedSeatsReadModel.from_events([SeatReservedEvent(1, 1, [1])])
        with pytest.raises(CustomerReservationsNotFoundError) as exc_info:
            read_model.reservations_for_customer(2)
        assert exc_info.value.customer_id == 2

    def test_empty_model_raises_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            ReservedSeatsReadModel().reservations_for_customer(1)

    def test_other_event_types_are_ignored(self) -> None:
        read_model = ReservedSeatsReadModel.from_events(
            [ScreeningScheduled(1), SeatReservedEvent(1, 1, [1])]
        )
        assert read_model.customers() == [1]

    def test_result_is_a_copy(self) -> None:
        read_model = ReservedSeatsReadModel.from_events([SeatReservedEvent(1, 1, [1])])
        read_model.reservations_for_customer(1).append(99)
        assert read_model.reservations_for_customer(1) == [1]

    def test_incremental_handle_matches_rebuild(self) -> None:
        events = [SeatReservedEvent(1, 1, [1]), SeatReservedEvent(1, 1, [2])]
        incremental = ReservedSeatsReadModel()
        for event in events:
            incremental.handle(event)
        rebuilt = ReservedSeatsReadModel.from_events(events)
        assert incremental.reservations_for_customer(1) == rebuilt.reservations_for_customer(1)

    def test_customer_with_empty_reservation_exists(self) -> None:
        read_model = ReservedSeatsReadModel.from_events([SeatReservedEvent(1, 7, [])])
        assert read_model.has_reservations(7)
        assert read_model.reservations_for_customer(7) == []

    def test_customers_in_first_seen_order(self) -> None:
        read_model = ReservedSeatsReadModel.from_events(
            [
                SeatReservedEvent(1, 3, [1]),
                SeatReservedEvent(1, 1, [2]),
                SeatReservedEvent(1, 3, [3]),
            ]
        )
        assert read_model.customers() == [3, 1]
        assert not read_model.has_reservations(2)
