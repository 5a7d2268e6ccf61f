"""Application-layer errors — wiring and dispatch failures."""

from __future__ import annotations

from seat_reservations.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class HandlerNotFoundError(ApplicationError, LookupError):
    """A bus was asked to dispatch a message type nobody registered for."""

    default_code = "handler_not_found"

    def __init__(self, message_type: type) -> None:
        super().__init__(
            f"No handler registered for {message_type.__name__!r}",
            message_type=message_type.__name__,
        )
        self.message_type = message_type


__all__ = ["ApplicationError", "HandlerNotFoundError"]
