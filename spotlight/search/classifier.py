"""
Input Classifier - Decide what the user means by the text in the search box.

Every non-empty input maps to exactly one intent:
  url     → "github.com", "https://example.org/x"
  bang    → "gh", "gh rust lang", "Y lofi"
  search  → anything else, sent to the default engine

URL-likeness is checked before bang prefixes, so "gh.com" is a URL.
"""

import re
import urllib.parse
from dataclasses import dataclass
from typing import Literal, assert_never

from .engines import EngineRegistry

IntentKind = Literal["url", "bang", "search"]

# One run of letters, optionally followed by whitespace and free text
BANG_RE = re.compile(r"^([A-Za-z]+)(\s+(.*))?$")

# Characters encodeURIComponent leaves untouched (besides alphanumerics and "_.-~")
_URI_COMPONENT_SAFE = "!*'()"

URL_ICON = "globe"
SEARCH_ICON = "system-search"

_default_registry = EngineRegistry()


@dataclass(frozen=True)
class UrlIntent:
    target_url: str
    display_text: str
    kind: Literal["url"] = "url"


@dataclass(frozen=True)
class BangIntent:
    target_url: str
    engine_name: str
    icon: str
    query: str
    display_text: str
    kind: Literal["bang"] = "bang"


@dataclass(frozen=True)
class SearchIntent:
    target_url: str
    icon: str
    display_text: str
    kind: Literal["search"] = "search"


ParsedIntent = UrlIntent | BangIntent | SearchIntent


def encode_query(text: str) -> str:
    """Percent-encode a query the way browsers encode a URI component."""
    return urllib.parse.quote(text, safe=_URI_COMPONENT_SAFE)


def complete_scheme(text: str) -> str:
    """Prefix https:// unless the text already starts with http."""
    return text if text.startswith("http") else f"https://{text}"


def is_likely_url(text: str) -> bool:
    """
    Heuristic URL check: a dot and no space, or an explicit http(s) scheme.

    Not a validator. "v1.2" counts as a URL and "localhost" does not.
    """
    text = text.strip()
    if "." in text and " " not in text:
        return True
    return text.startswith("http://") or text.startswith("https://")


def parse_input(text: str, registry: EngineRegistry | None = None) -> ParsedIntent | None:
    """
    Classify raw search box input.

    Args:
        text: The raw input string
        registry: Engines to match bang prefixes against (built-ins by default)

    Returns:
        UrlIntent, BangIntent or SearchIntent, or None for blank input.
    """
    registry = registry or _default_registry
    trimmed = text.strip()
    if not trimmed:
        return None

    if is_likely_url(trimmed):
        return UrlIntent(target_url=complete_scheme(trimmed), display_text=trimmed)

    match = BANG_RE.match(trimmed)
    if match:
        engine = registry.lookup(match.group(1))
        if engine:
            query = (match.group(3) or "").strip()
            if query:
                return BangIntent(
                    target_url=engine.query_template + encode_query(query),
                    engine_name=engine.name,
                    icon=engine.icon,
                    query=query,
                    display_text=f"{engine.name}: {query}",
                )
            return BangIntent(
                target_url=engine.homepage,
                engine_name=engine.name,
                icon=engine.icon,
                query="",
                display_text=f"Open {engine.name}",
            )

    engine = registry.default
    return SearchIntent(
        target_url=engine.query_template + encode_query(trimmed),
        icon=engine.icon,
        display_text=f'Search {engine.name} for "{trimmed}"',
    )


def intent_icon(intent: ParsedIntent | None) -> str:
    """Icon for the search box glyph: engine icon for bangs, globe for URLs."""
    match intent:
        case BangIntent(icon=icon):
            return icon
        case UrlIntent():
            return URL_ICON
        case SearchIntent() | None:
            return SEARCH_ICON
        case _:
            assert_never(intent)
