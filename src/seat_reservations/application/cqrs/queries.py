"""Application CQRS – Query, QueryHandler, QueryBus, InProcessQueryBus."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from seat_reservations.application.cqrs.registry import HandlerRegistry

Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


class Query:
    """Marker base for queries (read-only intent)."""


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Answers one query type.  Handlers must not change any state."""

    @abc.abstractmethod
    def handle(self, query: Q) -> R: ...

    def execute(self, query: Q) -> R:
        return self.handle(query)


class QueryBus(abc.ABC):
    @abc.abstractmethod
    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None: ...

    @abc.abstractmethod
    def ask(self, query: Query) -> Any: ...


class InProcessQueryBus(QueryBus):
    def __init__(self) -> None:
        self._registry: HandlerRegistry[Query, QueryHandler[Any, Any]] = HandlerRegistry()

    def register(self, query_type: type[Query], handler: QueryHandler[Any, Any]) -> None:
        self._registry.register(query_type, handler)

    def ask(self, query: Query) -> Any:
        return self._registry.resolve(query).handle(query)


__all__ = ["InProcessQueryBus", "Query", "QueryBus", "QueryHandler"]
