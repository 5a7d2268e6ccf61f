"""Testing generators – fluent builders for events and commands."""
from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from seat_reservations.application.reservations.commands import ReserveSeatsCommand
from seat_reservations.domain.events import SeatReservedEvent

T = TypeVar("T")


class Builder(Generic[T]):
    """Generic fluent builder base for constructing test objects.

    Each ``with_`` call returns a **new** builder so the original remains
    unchanged::

        base = SeatReservedEventBuilder()
        alice = base.with_(customer_id=1)
        bob = base.with_(customer_id=2, seats=(4, 5))
    """

    _cls: type[T]

    def __init__(self, **defaults: Any) -> None:
        self._attrs: dict[str, Any] = dict(defaults)

    def with_(self, **kwargs: Any) -> "Builder[T]":
        """Return a shallow copy of this builder with *kwargs* applied."""
        clone = copy.copy(self)
        clone._attrs = {**self._attrs, **kwargs}  # noqa: SLF001
        return clone

    @property
    def attrs(self) -> dict[str, Any]:
        return dict(self._attrs)

    def build(self) -> T:
        return self._cls(**self._attrs)  # type: ignore[call-arg]

    # Makes builders usable as callables, e.g. ``SeatReservedEventBuilder()(seats=(9,))``
    def __call__(self, **overrides: Any) -> T:
        if overrides:
            return self.with_(**overrides).build()
        return self.build()


class SeatReservedEventBuilder(Builder[SeatReservedEvent]):
    _cls = SeatReservedEvent

    def __init__(self) -> None:
        super().__init__(screening_id=1, customer_id=1, seats=(1, 2, 3))


class ReserveSeatsCommandBuilder(Builder[ReserveSeatsCommand]):
    _cls = ReserveSeatsCommand

    def __init__(self) -> None:
        super().__init__(screening_id=1, customer_id=1, seats=frozenset({1, 2, 3}))


__all__ = ["Builder", "ReserveSeatsCommandBuilder", "SeatReservedEventBuilder"]
