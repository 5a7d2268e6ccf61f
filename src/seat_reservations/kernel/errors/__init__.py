"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   ├── NotFoundError
    │   │   └── CustomerReservationsNotFoundError
    │   └── ConflictError
    │       └── OptimisticConcurrencyError
    └── ApplicationError                 (application.py)
        └── HandlerNotFoundError
"""

from seat_reservations.kernel.errors.application import (
    ApplicationError,
    HandlerNotFoundError,
)
from seat_reservations.kernel.errors.base import BaseError
from seat_reservations.kernel.errors.domain import (
    ConflictError,
    CustomerReservationsNotFoundError,
    DomainError,
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
