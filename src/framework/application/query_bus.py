from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Any

from .handler_resolver import HandlerResolver


class Query(ABC):
    """Base class for all queries (read-only requests)."""
    pass


TQuery = TypeVar('TQuery', bound=Query)
TResult = TypeVar('TResult')


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class for all query handlers."""

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        pass


class QueryBus:
    """Dispatches queries to the handler registered in the container."""

    def __init__(self, container: Any) -> None:
        self._resolver = HandlerResolver(container)

    def query(self, query: Query) -> Any:
        return self._resolver.resolve(query).handle(query)
