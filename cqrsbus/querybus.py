"""Query bus that answers read-only queries through registered handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cqrsbus.eventbus import HandlerNotFoundError

__all__ = ["QueryBus", "QueryHandler", "QueryResult", "default_query_bus"]


@dataclass(frozen=True)
class QueryResult:
    """The payload a query produced and whether it succeeded."""

    payload: Any = None
    success: bool = False


class QueryHandler(ABC):
    """Answers one kind of query."""

    @abstractmethod
    def handle(self, query: Any) -> QueryResult:
        """Answer ``query``."""


class QueryBus:
    """Maps query types to a single handler each."""

    def __init__(self) -> None:
        self._handlers: dict[type, QueryHandler] = {}

    def ask(self, query: Any) -> QueryResult:
        """Answer ``query`` with the handler registered for its type."""
        query_type = type(query)
        handler = self._handlers.get(query_type)
        if handler is None:
            raise HandlerNotFoundError(
                f"no handler registered for query type: {query_type.__name__}"
            )
        return handler.handle(query)

    def register(self, query: Any, handler: QueryHandler) -> None:
        """Set ``handler`` for queries of the type of ``query``, replacing any other."""
        self._handlers[type(query)] = handler


def default_query_bus() -> QueryBus:
    """Return an empty query bus."""
    return QueryBus()