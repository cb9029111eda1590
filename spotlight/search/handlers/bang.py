"""
Bang Handler - Single suggestion for an engine prefix followed by a query.

Triggers when the first word is a registered bang and whitespace follows:
  y taylor swift   → "taylor swift" / Search YouTube
  GH ripgrep       → "ripgrep" / Search GitHub

Bang suggestions are built locally, so no provider call is made and the
default row is not included.
"""

import re

from ..classifier import encode_query
from ..engines import EngineDescriptor, EngineRegistry
from ..router import SuggestionItem

# First word, at least one whitespace character, then anything
PREFIX_RE = re.compile(r"^(\S+)\s+(.*)$", re.DOTALL)


class BangHandler:
    """Suggest a search on the engine named by the leading bang."""

    name = "bang"
    priority = 100

    def __init__(self, registry: EngineRegistry):
        self.registry = registry

    def _split(self, query: str) -> tuple[EngineDescriptor | None, str]:
        match = PREFIX_RE.match(query)
        if not match:
            return None, ""
        return self.registry.lookup(match.group(1)), match.group(2).strip()

    def matches(self, query: str) -> bool:
        engine, _ = self._split(query)
        return engine is not None

    async def get_results(self, query: str) -> list[SuggestionItem] | None:
        engine, remainder = self._split(query)
        if engine is None or not remainder:
            # Bare "gh " keeps whatever is currently rendered
            return None

        return [SuggestionItem(
            title=remainder,
            subtitle=f"Search {engine.name}",
            icon=engine.icon,
            target_url=engine.query_template + encode_query(remainder),
        )]
