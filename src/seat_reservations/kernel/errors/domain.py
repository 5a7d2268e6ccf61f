"""Domain errors — business rule violations and missing state.

A seat conflict is *not* an error: :meth:`Screening.reserve_seats` reports it
by returning ``False``.  The errors below are contract violations.
"""

from __future__ import annotations

from typing import Any

from seat_reservations.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class NotFoundError(DomainError):
    """Something looked up by key has never existed."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **detail: Any) -> None:
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, **detail)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    default_code = "conflict"


class CustomerReservationsNotFoundError(NotFoundError, LookupError):
    """The read model has never seen a reservation by this customer.

    Also a :class:`LookupError`, the same family as a missing dict key.
    """

    default_code = "customer_reservations_not_found"

    def __init__(self, customer_id: int) -> None:
        super().__init__("Reservations for customer", customer_id, customer_id=customer_id)
        self.customer_id = customer_id


class OptimisticConcurrencyError(ConflictError):
    """A stream grew between reading it and appending to it."""

    default_code = "optimistic_concurrency_conflict"

    def __init__(self, stream_id: Any, expected: int, actual: int) -> None:
        super().__init__(
            f"Concurrency conflict on stream '{stream_id}': "
            f"expected version {expected}, found {actual}",
            stream_id=stream_id,
            expected=expected,
            actual=actual,
        )
        self.stream_id = stream_id
        self.expected = expected
        self.actual = actual


__all__ = [
    "ConflictError",
    "CustomerReservationsNotFoundError",
    "DomainError",
    "NotFoundError",
    "OptimisticConcurrencyError",
]
