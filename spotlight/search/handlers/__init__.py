"""
Suggestion handlers - One per orchestration branch.

Each handler checks if it can handle a query and returns suggestion rows.
"""

from .bang import BangHandler
from .url import UrlHandler
from .web_suggestions import WebSuggestionsHandler, default_item

__all__ = [
    "BangHandler",
    "UrlHandler",
    "WebSuggestionsHandler",
    "default_item",
]
