"""Kernel DDD building blocks."""

from seat_reservations.kernel.ddd.aggregate import AggregateRoot
from seat_reservations.kernel.ddd.domain_event import DomainEvent

__all__ = ["AggregateRoot", "DomainEvent"]
