"""
Search Panel - Connects the search box to the suggestion core.

Features:
- Search box glyph follows the classified intent (engine, globe, magnifier)
- Debounced live suggestions, first row pre-selected
- Keyboard navigation (arrow keys, Enter to open, Tab to complete)
- Escape hides the window but keeps the query
- Pointer hover moves the selection
- Clear search state after a URL is opened
"""

from typing import Any

from loguru import logger

from ..search.classifier import ParsedIntent, intent_icon, parse_input
from ..search.debounce import DebounceGate
from ..search.engines import load_engines
from ..search.orchestrator import SuggestionOrchestrator, SuggestionSession
from ..search.router import SuggestionItem
from ..services.browser import XdgOpenLauncher
from ..utils.helpers import DEFAULT_SETTINGS, _deep_merge, load_settings, validate_settings


class SearchPanel:
    """
    Search box controller.

    The host forwards input, key and hover events; the panel drives the
    renderer, window and browser collaborators.
    """

    def __init__(self, provider, renderer, window, launcher=None,
                 settings: dict[str, Any] | None = None):
        if settings is None:
            settings = load_settings()
        else:
            settings = validate_settings(_deep_merge(DEFAULT_SETTINGS, settings))
        search = settings["search"]

        self.registry = load_engines(settings)
        self.orchestrator = SuggestionOrchestrator(
            provider,
            self.registry,
            min_query_length=search["min_query_length"],
            max_suggestions=search["max_suggestions"],
        )
        self.gate = DebounceGate(self._fetch, delay_ms=search["debounce_ms"])

        self.renderer = renderer
        self.window = window
        self.launcher = launcher or XdgOpenLauncher()

        self.query = ""

    @property
    def session(self) -> SuggestionSession:
        return self.orchestrator.session

    def on_input_changed(self, text: str) -> None:
        """Handle search box text changes."""
        self.query = text
        value = text.strip()

        self._update_icon(parse_input(value, self.registry))
        self.gate.cancel()
        # Results for the previous text must not land under the new text
        self.orchestrator.invalidate()

        if not value:
            # Blank input clears immediately, no debounce
            self.orchestrator.clear()
            self._render([])
            return

        self.gate.schedule(value)

    async def _fetch(self, query: str) -> None:
        await self.orchestrator.fetch_suggestions(query, self._render)

    def _render(self, items: list[SuggestionItem]) -> None:
        self.renderer.render(items)
        self.renderer.select(self.session.selected_index)
        self.window.resize(bool(items), len(items))

    def _update_icon(self, intent: ParsedIntent | None) -> None:
        self.renderer.update_icon(intent.kind if intent else None, intent_icon(intent))

    def on_hover(self, index: int) -> None:
        """Pointer entered row `index`."""
        if self.session.cursor.activate(index):
            self.renderer.select(index)

    async def on_key(self, key: str) -> bool:
        """
        Handle keyboard events - arrows for navigation, Enter to open,
        Tab to complete, Escape to hide.

        Args:
            key: Key name ("Enter", "ArrowDown", "ArrowUp", "Escape", "Tab")

        Returns:
            True if the key was consumed.
        """
        cursor = self.session.cursor

        match key:
            case "Enter":
                item = self.session.selected_item
                if item is not None:
                    await self.execute_action(item.target_url)
                else:
                    intent = parse_input(self.query, self.registry)
                    if intent is not None:
                        await self.execute_action(intent.target_url)
                return True

            case "ArrowDown":
                cursor.move_down()
                self.renderer.select(cursor.selected_index)
                return True

            case "ArrowUp":
                cursor.move_up()
                self.renderer.select(cursor.selected_index)
                return True

            case "Escape":
                # Hide only; the query survives until the next open
                await self.window.hide()
                return True

            case "Tab":
                item = self.session.selected_item
                if item is not None:
                    self.query = item.title
                    self.renderer.set_query(item.title)
                    self.gate.cancel()
                    await self._fetch(item.title)
                return True

        return False

    async def execute_action(self, url: str) -> bool:
        """
        Open `url` in the browser, then reset and hide the search box.

        A failed launch is logged and leaves the panel untouched.
        """
        try:
            opened = await self.launcher.open(url)
        except Exception:
            logger.exception(f"Failed to open {url}")
            return False
        if not opened:
            logger.warning(f"Browser launcher could not open {url}")
            return False

        self.reset()
        try:
            await self.window.hide()
        except Exception:
            logger.exception(f"Opened {url} but could not hide the window")

        return True

    def reset(self) -> None:
        """Clear the query, suggestions and selection."""
        self.gate.cancel()
        self.orchestrator.clear()
        self.query = ""
        self.renderer.set_query("")
        self.renderer.render([])
        self._update_icon(None)
        self.window.resize(False, 0)

    def on_focus(self) -> None:
        """Window was shown; collapse to the bare search bar if empty."""
        if not self.query:
            self.window.resize(False, 0)
