# Spotlight Services Package
"""
Host-facing services for the search box.

Protocols for the collaborators the core depends on, plus the default
xdg-open browser launcher.
"""

from .browser import XdgOpenLauncher
from .interfaces import BrowserLauncher, Renderer, SuggestionProvider, WindowController

__all__ = [
    "BrowserLauncher",
    "Renderer",
    "SuggestionProvider",
    "WindowController",
    "XdgOpenLauncher",
]
