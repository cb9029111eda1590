"""
Web Suggestions Handler - Live completions from the suggestion provider.

Fallback for everything that is neither a bang nor a URL. The first row is
always the default action for the typed text, followed by up to
max_suggestions provider terms searched on the default engine.

Provider errors never reach the user: the list degrades to the default row.
"""

from typing import assert_never

from loguru import logger

from ..classifier import (
    URL_ICON,
    BangIntent,
    ParsedIntent,
    SearchIntent,
    UrlIntent,
    encode_query,
    parse_input,
)
from ..engines import EngineRegistry
from ..router import SuggestionItem


def default_item(query: str, intent: ParsedIntent) -> SuggestionItem:
    """The row derived purely from classifying the typed text."""
    match intent:
        case BangIntent(icon=icon) | SearchIntent(icon=icon):
            pass
        case UrlIntent():
            icon = URL_ICON
        case _:
            assert_never(intent)

    return SuggestionItem(
        title=query,
        subtitle=intent.display_text,
        icon=icon,
        target_url=intent.target_url,
    )


class WebSuggestionsHandler:
    """Merge the default row with provider suggestions."""

    name = "web_suggestions"
    priority = 1000

    def __init__(self, provider, registry: EngineRegistry, max_suggestions: int = 6):
        self.provider = provider
        self.registry = registry
        self.max_suggestions = max_suggestions

    def matches(self, query: str) -> bool:
        return True

    async def get_results(self, query: str) -> list[SuggestionItem]:
        intent = parse_input(query, self.registry)
        if intent is None:
            return []
        defaults = [default_item(query, intent)]

        try:
            terms = await self.provider.fetch(query)
        except Exception as e:
            logger.warning(f"Suggestion provider failed for '{query}': {e}")
            return defaults

        if not isinstance(terms, (list, tuple)):
            logger.warning(f"Suggestion provider returned {type(terms).__name__}, expected a list")
            return defaults

        engine = self.registry.default
        return defaults + [
            SuggestionItem(
                title=str(term),
                subtitle=f"Search {engine.name}",
                icon=engine.icon,
                target_url=engine.query_template + encode_query(str(term)),
            )
            for term in terms[:self.max_suggestions]
        ]
