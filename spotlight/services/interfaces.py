"""
Collaborator interfaces - What the host application provides.

The search core never talks to the network, the browser or the window
system directly; it goes through these protocols.
"""

from typing import Protocol

from ..search.classifier import IntentKind
from ..search.router import SuggestionItem


class SuggestionProvider(Protocol):
    async def fetch(self, query: str) -> list[str]:
        """Completion terms for `query`. May raise on any failure."""
        ...


class BrowserLauncher(Protocol):
    async def open(self, url: str) -> bool:
        """Open `url` in the user's browser. False (or raising) means failure."""
        ...


class WindowController(Protocol):
    async def hide(self) -> None:
        ...

    def resize(self, has_results: bool, item_count: int) -> None:
        """Fit the window to the search bar plus `item_count` rows."""
        ...


class Renderer(Protocol):
    def render(self, items: list[SuggestionItem]) -> None:
        ...

    def select(self, index: int) -> None:
        """Highlight row `index` (-1 clears the highlight)."""
        ...

    def update_icon(self, kind: IntentKind | None, icon: str) -> None:
        """Swap the search box glyph for the classified intent."""
        ...

    def set_query(self, text: str) -> None:
        """Replace the search box text without firing a change event."""
        ...
