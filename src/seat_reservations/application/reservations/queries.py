"""Reservations – read side."""

from __future__ import annotations

import dataclasses

from seat_reservations.application.cqrs.queries import Query, QueryHandler
from seat_reservations.application.reservations.read_model import ReservedSeatsReadModel


@dataclasses.dataclass(frozen=True)
class MyReservedSeatsQuery(Query):
    customer_id: int


class MyReservedSeatsHandler(QueryHandler[MyReservedSeatsQuery, list[int]]):
    """Answers :class:`MyReservedSeatsQuery` straight from the read model."""

    def __init__(self, read_model: ReservedSeatsReadModel) -> None:
        self._read_model = read_model

    def handle(self, query: MyReservedSeatsQuery) -> list[int]:
        return self._read_model.reservations_for_customer(query.customer_id)


__all__ = ["MyReservedSeatsHandler", "MyReservedSeatsQuery"]
