"""Application CQRS – Command, CommandHandler, CommandBus, InProcessCommandBus."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from seat_reservations.application.cqrs.registry import HandlerRegistry

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state)."""


class CommandHandler(abc.ABC, Generic[C]):
    @abc.abstractmethod
    def handle(self, command: C) -> Any: ...


class CommandBus(abc.ABC):
    @abc.abstractmethod
    def register(self, command_type: type[Command], handler: CommandHandler[Any]) -> None: ...

    @abc.abstractmethod
    def dispatch(self, command: Command) -> Any: ...


class InProcessCommandBus(CommandBus):
    """Runs the handler on the caller's stack and returns its result.

    Raises :class:`~seat_reservations.kernel.errors.HandlerNotFoundError`
    for an unregistered command type.
    """

    def __init__(self) -> None:
        self._registry: HandlerRegistry[Command, CommandHandler[Any]] = HandlerRegistry()

    def register(self, command_type: type[Command], handler: CommandHandler[Any]) -> None:
        self._registry.register(command_type, handler)

    def dispatch(self, command: Command) -> Any:
        return self._registry.resolve(command).handle(command)


__all__ = ["Command", "CommandBus", "CommandHandler", "InProcessCommandBus"]
