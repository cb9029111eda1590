"""
Search package - Query classification and suggestion orchestration.

Queries are classified into url / bang / search intents, and live
suggestions are dispatched to priority-ordered handlers (bang, url,
web suggestions) behind a debounce gate.
"""

from .classifier import (
    BangIntent,
    ParsedIntent,
    SearchIntent,
    UrlIntent,
    is_likely_url,
    parse_input,
)
from .cursor import SelectionCursor
from .debounce import DebounceGate
from .engines import EngineDescriptor, EngineRegistry, load_engines
from .orchestrator import SuggestionOrchestrator, SuggestionSession
from .router import SuggestionHandler, SuggestionItem, SuggestionRouter

__all__ = [
    "BangIntent",
    "DebounceGate",
    "EngineDescriptor",
    "EngineRegistry",
    "ParsedIntent",
    "SearchIntent",
    "SelectionCursor",
    "SuggestionHandler",
    "SuggestionItem",
    "SuggestionOrchestrator",
    "SuggestionRouter",
    "SuggestionSession",
    "UrlIntent",
    "is_likely_url",
    "load_engines",
    "parse_input",
]
