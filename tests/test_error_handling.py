"""
Tests for graceful degradation.

Verifies nothing in the suggestion path is fatal:
- Provider exceptions
- Provider returning something other than a list
- Renderer blowing up inside a debounced fetch
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from spotlight.panels.search import SearchPanel
from spotlight.search.orchestrator import SuggestionOrchestrator


class TestProviderErrors:
    """Provider problems narrow the list to the default row."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [TimeoutError(), ValueError("bad json"), KeyError(1)])
    async def test_any_exception_degrades(self, error):
        provider = MagicMock()
        provider.fetch = AsyncMock(side_effect=error)
        orchestrator = SuggestionOrchestrator(provider)
        deliver = MagicMock()
        await orchestrator.fetch_suggestions("weather", deliver)
        items = deliver.call_args.args[0]
        assert len(items) == 1
        assert items[0].subtitle == 'Search Google for "weather"'

    @pytest.mark.asyncio
    async def test_non_list_result_degrades(self):
        provider = MagicMock()
        provider.fetch = AsyncMock(return_value={"terms": ["a"]})
        orchestrator = SuggestionOrchestrator(provider)
        deliver = MagicMock()
        await orchestrator.fetch_suggestions("weather", deliver)
        assert len(deliver.call_args.args[0]) == 1


class TestRendererErrors:

    @pytest.mark.asyncio
    async def test_render_failure_does_not_escape_gate(self, provider, window, launcher, settings):
        renderer = MagicMock()
        renderer.render.side_effect = RuntimeError("widget destroyed")
        panel = SearchPanel(provider, renderer, window, launcher=launcher, settings=settings)

        panel.on_input_changed("rust")
        await asyncio.sleep(0.02)
        await panel.gate.flush()

        renderer.render.assert_called_once()
        # Next keystroke still works
        panel.on_input_changed("rust lang")
        await asyncio.sleep(0.02)
        await panel.gate.flush()
        assert renderer.render.call_count == 2
