"""Kernel – framework-agnostic building blocks."""

from seat_reservations.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    CustomerReservationsNotFoundError,
    DomainError,
    HandlerNotFoundError,
    NotFoundError,
    OptimisticConcurrencyError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "CustomerReservationsNotFoundError",
    "DomainError",
    "HandlerNotFoundError",
    "NotFoundError",
    "OptimisticConcurrencyError",
]
