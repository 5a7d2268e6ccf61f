"""Application CQRS – HandlerRegistry shared by the in-process buses."""
from __future__ import annotations

from typing import Generic, TypeVar

from seat_reservations.kernel.errors import HandlerNotFoundError

M = TypeVar("M")
H = TypeVar("H")


class HandlerRegistry(Generic[M, H]):
    """One handler per exact message type; registering again replaces it."""

    def __init__(self) -> None:
        self._handlers: dict[type[M], H] = {}

    def register(self, message_type: type[M], handler: H) -> None:
        self._handlers[message_type] = handler

    def resolve(self, message: M) -> H:
        try:
            return self._handlers[type(message)]
        except KeyError:
            raise HandlerNotFoundError(type(message)) from None

    def __contains__(self, message_type: object) -> bool:
        return message_type in self._handlers


__all__ = ["HandlerRegistry"]
