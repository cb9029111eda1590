"""
Suggestion Router - Dispatches a query to priority-ordered suggestion handlers.

Each handler declares a priority (lower = checked first) and a matches()
method. The router awaits the first matching handler's results. Web
suggestions are the fallback (highest priority number).

A handler may return None instead of a list, meaning "leave the rendered
list untouched".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class SuggestionItem:
    """A single row in the suggestion list."""
    title: str
    subtitle: str = ""
    icon: str | None = None
    target_url: str = ""


class SuggestionHandler(ABC):
    """Base class for all suggestion handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first. Web suggestions should be ~1000."""
        ...

    @abstractmethod
    def matches(self, query: str) -> bool:
        """Return True if this handler should process the query."""
        ...

    @abstractmethod
    async def get_results(self, query: str) -> list[SuggestionItem] | None:
        """Return suggestions for the query, or None to deliver nothing."""
        ...


class SuggestionRouter:
    """Routes queries to the appropriate handler based on priority."""

    def __init__(self):
        self._handlers: list[SuggestionHandler] = []

    def register(self, handler: SuggestionHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    async def route(self, query: str) -> tuple[str, list[SuggestionItem] | None]:
        """
        Find the first matching handler and await its results.

        Args:
            query: The search query string

        Returns:
            Tuple of (handler_name, results).
            Returns ("none", []) if no handler matches.
        """
        for handler in self._handlers:
            if handler.matches(query):
                logger.debug(f"Routing '{query}' to {handler.name}")
                return handler.name, await handler.get_results(query)

        return "none", []
