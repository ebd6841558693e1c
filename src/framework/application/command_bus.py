from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Any

from .handler_resolver import HandlerResolver


class Command(ABC):
    """Base class for all commands (state-changing requests)."""
    pass


TCommand = TypeVar('TCommand', bound=Command)
TResult = TypeVar('TResult')


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class for all command handlers."""

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        pass


class CommandBus:
    """Dispatches commands to the handler registered in the container."""

    def __init__(self, container: Any) -> None:
        self._resolver = HandlerResolver(container)

    def dispatch(self, command: Command) -> Any:
        return self._resolver.resolve(command).handle(command)
