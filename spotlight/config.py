"""
Spotlight Web - Search box wiring

Builds a SearchPanel from settings.toml and the host's collaborators.

Usage:
  from spotlight.config import create_search_panel

  panel = create_search_panel(provider, renderer, window)
  panel.on_input_changed("gh ripgrep")
"""

from pathlib import Path

from loguru import logger

from .panels.search import SearchPanel
from .utils.helpers import load_settings


def create_search_panel(provider, renderer, window, launcher=None,
                        settings_file: Path | None = None) -> SearchPanel:
    """
    Create a search panel wired to the host collaborators.

    Args:
        provider: SuggestionProvider for live completions
        renderer: Renderer for the result rows and search glyph
        window: WindowController for hide/resize
        launcher: BrowserLauncher (xdg-open when omitted)
        settings_file: Explicit settings.toml (XDG location when omitted)

    Returns:
        SearchPanel ready to receive input events
    """
    settings = load_settings(settings_file)
    panel = SearchPanel(provider, renderer, window, launcher=launcher, settings=settings)

    engines = ", ".join(engine.key for engine in panel.registry)
    logger.info(f"Spotlight search initialized (engines: {engines}, default: {panel.registry.default.key})")
    return panel
