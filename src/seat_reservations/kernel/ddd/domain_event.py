"""Domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    ``event_id`` and ``occurred_at`` are envelope metadata: they are keyword-only
    and take no part in equality or hashing, so two events carrying the same
    payload compare equal.

    Example::

        @dataclasses.dataclass(frozen=True)
        class SeatReserved(DomainEvent):
            screening_id: int
            seat: int
    """

    event_id: str = dataclasses.field(
        default_factory=lambda: str(uuid4()), compare=False, kw_only=True
    )
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), compare=False, kw_only=True
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__

    @property
    def aggregate_id(self) -> Any:
        """Identifier of the aggregate stream this event belongs to."""
        return None


__all__ = ["DomainEvent"]
