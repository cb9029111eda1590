"""
URL Handler - Offer to open the typed text as a website.

Triggers on anything that looks like a URL ("github.com", "http://x").
No provider call is made.
"""

from ..classifier import URL_ICON, complete_scheme, is_likely_url
from ..router import SuggestionItem


class UrlHandler:
    """Open the query as a website."""

    name = "url"
    priority = 200

    def matches(self, query: str) -> bool:
        return is_likely_url(query)

    async def get_results(self, query: str) -> list[SuggestionItem]:
        return [SuggestionItem(
            title=query,
            subtitle="Open website",
            icon=URL_ICON,
            target_url=complete_scheme(query),
        )]
