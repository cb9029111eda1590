"""
Shared test fixtures for the Spotlight test suite.

Provides real settings files on disk and in-memory stand-ins for the host
collaborators (suggestion provider, renderer, window, browser launcher).
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
import toml

from spotlight.utils.helpers import DEFAULT_SETTINGS, _deep_merge


class ControlledProvider:
    """Suggestion provider whose responses are released by the test."""

    def __init__(self):
        self.calls = []
        self._futures = {}

    def _future(self, query):
        if query not in self._futures:
            self._futures[query] = asyncio.get_running_loop().create_future()
        return self._futures[query]

    async def fetch(self, query):
        self.calls.append(query)
        return await self._future(query)

    def resolve(self, query, terms):
        self._future(query).set_result(terms)

    def reject(self, query, exc):
        self._future(query).set_exception(exc)


@pytest.fixture
def controlled_provider():
    return ControlledProvider()


@pytest.fixture
def provider():
    """Provider that answers every query with three terms."""
    mock = MagicMock()
    mock.fetch = AsyncMock(side_effect=lambda q: [f"{q} one", f"{q} two", f"{q} three"])
    return mock


@pytest.fixture
def renderer():
    return MagicMock()


@pytest.fixture
def window():
    mock = MagicMock()
    mock.hide = AsyncMock()
    return mock


@pytest.fixture
def launcher():
    mock = MagicMock()
    mock.open = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def settings():
    """Default settings with a 1ms debounce so tests stay fast."""
    return _deep_merge(DEFAULT_SETTINGS, {"search": {"debounce_ms": 1}})


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with a custom engine."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"debounce_ms": 200, "max_suggestions": 4},
        "engines": {
            "w": {
                "name": "Wikipedia",
                "query_template": "https://en.wikipedia.org/w/index.php?search=",
                "homepage": "https://en.wikipedia.org",
                "icon": "accessories-dictionary",
            },
        },
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
