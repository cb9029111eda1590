"""
Suggestion Orchestrator - Turns the typed query into the rendered suggestion list.

Flow for each fetch:
  1. Bump the session generation (every fetch, including short-circuits)
  2. Query shorter than min_query_length → deliver []
  3. Route to the first matching handler:
       bang (100)            → single engine row, or nothing for a bare "gh "
       url (200)             → single "Open website" row
       web_suggestions (1000) → default row + provider terms
  4. Deliver only if no newer fetch started while awaiting the handler

The provider call cannot be cancelled. A slow response for an old query is
dropped by the generation check before it can touch the session.
"""

from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

from .cursor import SelectionCursor
from .engines import EngineRegistry
from .handlers import BangHandler, UrlHandler, WebSuggestionsHandler
from .router import SuggestionItem, SuggestionRouter

Deliver = Callable[[list[SuggestionItem]], None]


@dataclass
class SuggestionSession:
    """The list currently on screen, its selection, and the fetch generation."""
    raw_query: str = ""
    items: list[SuggestionItem] = field(default_factory=list)
    generation: int = 0
    cursor: SelectionCursor = field(default_factory=SelectionCursor)

    @property
    def selected_index(self) -> int:
        return self.cursor.selected_index

    @property
    def selected_item(self) -> SuggestionItem | None:
        if 0 <= self.selected_index < len(self.items):
            return self.items[self.selected_index]
        return None


class SuggestionOrchestrator:
    """Owns the SuggestionSession and decides what gets delivered."""

    def __init__(self, provider, registry: EngineRegistry | None = None,
                 min_query_length: int = 2, max_suggestions: int = 6):
        self.registry = registry or EngineRegistry()
        self.min_query_length = min_query_length
        self.session = SuggestionSession()

        self.router = SuggestionRouter()
        self.router.register(BangHandler(self.registry))
        self.router.register(UrlHandler())
        self.router.register(WebSuggestionsHandler(provider, self.registry, max_suggestions))

    def _next_generation(self) -> int:
        self.session.generation += 1
        return self.session.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.session.generation

    async def fetch_suggestions(self, query: str, deliver: Deliver) -> bool:
        """
        Compute suggestions for `query` and hand them to `deliver`.

        Args:
            query: The (already trimmed) search box text
            deliver: Called with the final ordered list, at most once

        Returns:
            True if a list was delivered, False if the result was stale
            or the handler chose to deliver nothing.
        """
        generation = self._next_generation()

        if not query or len(query) < self.min_query_length:
            return self._deliver(generation, query, [], deliver)

        handler_name, items = await self.router.route(query)
        if items is None:
            logger.debug(f"{handler_name} produced nothing for '{query}'")
            return False

        return self._deliver(generation, query, items, deliver)

    def _deliver(self, generation: int, query: str,
                 items: list[SuggestionItem], deliver: Deliver) -> bool:
        # Stale check must happen before the session is touched
        if not self.is_current(generation):
            logger.debug(
                f"Discarding stale suggestions for '{query}' "
                f"(generation {generation}, current {self.session.generation})"
            )
            return False

        self.session = SuggestionSession(
            raw_query=query,
            items=list(items),
            generation=generation,
            cursor=SelectionCursor(len(items)),
        )
        deliver(self.session.items)
        return True

    def invalidate(self) -> None:
        """Make any fetch still in flight stale, keeping the current list."""
        self._next_generation()

    def clear(self) -> None:
        """Drop the current list and invalidate any fetch still in flight."""
        self.session = SuggestionSession(generation=self.session.generation + 1)
