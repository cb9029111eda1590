"""
Engine Registry - Bang prefixes mapped to search engines.

A bang is a short run of letters typed before the query:
  g rust async     → Google
  y taylor swift   → YouTube
  gh ripgrep       → GitHub

The query is percent-encoded and appended to the engine's query template.
Additional engines can be declared in settings.toml under [engines.<key>].
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from loguru import logger

ENGINE_KEY_RE = re.compile(r"^[a-z]+$")


@dataclass(frozen=True)
class EngineDescriptor:
    """A search engine reachable through a bang prefix."""
    key: str
    name: str
    query_template: str
    homepage: str
    icon: str = "web-browser"


DEFAULT_ENGINES = {
    "g": EngineDescriptor(
        key="g",
        name="Google",
        query_template="https://www.google.com/search?q=",
        homepage="https://www.google.com",
        icon="google",
    ),
    "y": EngineDescriptor(
        key="y",
        name="YouTube",
        query_template="https://www.youtube.com/results?search_query=",
        homepage="https://www.youtube.com",
        icon="youtube",
    ),
    "gh": EngineDescriptor(
        key="gh",
        name="GitHub",
        query_template="https://github.com/search?q=",
        homepage="https://github.com",
        icon="github",
    ),
}

DEFAULT_ENGINE_KEY = "g"


class EngineRegistry:
    """Read-only lookup of engines by bang key, plus the default engine."""

    def __init__(self, engines: Mapping[str, EngineDescriptor] | None = None,
                 default_key: str = DEFAULT_ENGINE_KEY):
        engines = dict(engines if engines is not None else DEFAULT_ENGINES)
        if default_key not in engines:
            raise ValueError(f"Default engine '{default_key}' is not registered")
        self._engines = MappingProxyType(engines)
        self._default_key = default_key

    @property
    def default(self) -> EngineDescriptor:
        return self._engines[self._default_key]

    def lookup(self, prefix: str) -> EngineDescriptor | None:
        """Case-insensitive lookup of a bang prefix."""
        return self._engines.get(prefix.lower())

    def __contains__(self, prefix: str) -> bool:
        return self.lookup(prefix) is not None

    def __iter__(self) -> Iterator[EngineDescriptor]:
        return iter(self._engines.values())

    def __len__(self) -> int:
        return len(self._engines)


def load_engines(settings: dict[str, Any]) -> EngineRegistry:
    """
    Build the registry from the built-in engines and settings overrides.

    Args:
        settings: Merged settings dict (see utils.helpers.load_settings)

    Returns:
        EngineRegistry with [engines.*] entries merged over DEFAULT_ENGINES.
        Malformed entries are skipped with a warning.
    """
    engines = dict(DEFAULT_ENGINES)

    overrides = settings.get("engines", {})
    if not isinstance(overrides, dict):
        logger.warning("Ignoring malformed [engines] section, expected a table")
        overrides = {}

    for key, entry in overrides.items():
        if not ENGINE_KEY_RE.match(key):
            logger.warning(f"Skipping engine '{key}': keys must be lowercase letters")
            continue
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed engine '{key}'")
            continue

        base = engines.get(key)
        fields = {
            "name": entry.get("name", base.name if base else None),
            "query_template": entry.get("query_template", base.query_template if base else None),
            "homepage": entry.get("homepage", base.homepage if base else None),
        }
        fields["icon"] = entry.get("icon", base.icon if base else "web-browser")

        missing = [name for name, value in fields.items() if value is None]
        if missing:
            logger.warning(f"Skipping engine '{key}': missing {', '.join(missing)}")
            continue
        invalid = [name for name, value in fields.items() if not isinstance(value, str) or not value]
        if invalid:
            logger.warning(f"Skipping engine '{key}': {', '.join(invalid)} must be non-empty strings")
            continue

        engines[key] = EngineDescriptor(key=key, **fields)

    search = settings.get("search", {})
    if not isinstance(search, dict):
        search = {}
    default_key = search.get("default_engine", DEFAULT_ENGINE_KEY)
    if not isinstance(default_key, str) or default_key not in engines:
        logger.warning(f"Unknown default engine '{default_key}', using '{DEFAULT_ENGINE_KEY}'")
        default_key = DEFAULT_ENGINE_KEY

    return EngineRegistry(engines, default_key=default_key)
