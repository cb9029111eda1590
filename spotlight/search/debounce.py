"""
Debounce Gate - Run the suggestion fetch only once typing pauses.

Every new value cancels the pending timer and starts a fresh one. When the
timer fires, the fetch runs as its own task, so a later keystroke cancels
only the timer and never an in-flight provider call. Stale results from
such calls are dropped by the orchestrator's generation check.
"""

import asyncio
from typing import Awaitable, Callable

from loguru import logger

DEFAULT_DEBOUNCE_MS = 150


class DebounceGate:
    """Delay `callback(value)` until no new value arrived for `delay_ms`."""

    def __init__(self, callback: Callable[[str], Awaitable[object]],
                 delay_ms: int = DEFAULT_DEBOUNCE_MS):
        self.callback = callback
        self.delay_ms = delay_ms
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a scheduled call has not fired yet."""
        return self._timer is not None

    def schedule(self, value: str) -> None:
        """Replace any pending call with one for `value`."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay_ms / 1000, self._fire, value)

    def cancel(self) -> None:
        """Drop the pending call, if any. In-flight fetches keep running."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, value: str) -> None:
        self._timer = None
        task = asyncio.ensure_future(self.callback(value))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.opt(exception=exc).error("Debounced suggestion fetch failed")

    async def flush(self) -> None:
        """Wait for every fetch already started by the gate."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
