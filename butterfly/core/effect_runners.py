"""
EFFECT RUNNERS

Host capabilities that execute a button's action on behalf of the engine.

Rules:
- One call per effect, result discarded
- Never awaited by the engine (fire-and-forget)
- Async work is scheduled on the event loop and tracked until done
"""

import asyncio
import inspect
import logging
from typing import Any, Optional, Set

logger = logging.getLogger(__name__)


def run_callable(effect: Any) -> None:
    """Run a zero-argument callable synchronously, discarding its result."""
    effect()


class AsyncioEffectRunner:
    """
    Schedules effects on an asyncio event loop without awaiting them.

    Accepts coroutine functions, awaitables, and plain callables. A plain
    callable that returns an awaitable has that awaitable scheduled too.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._in_flight: Set[asyncio.Future] = set()

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def __call__(self, effect: Any) -> None:
        # Loop first: nothing is invoked or created if there is none
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(effect):
                effect.close()
            raise

        if inspect.isawaitable(effect):
            self._schedule(effect, loop)
            return

        result = effect()
        if inspect.isawaitable(result):
            self._schedule(result, loop)

    def _schedule(self, awaitable: Any, loop: asyncio.AbstractEventLoop) -> None:
        task = asyncio.ensure_future(awaitable, loop=loop)
        self._in_flight.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Future) -> None:
        self._in_flight.discard(task)

        if task.cancelled():
            logger.info("Portal effect cancelled")
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Portal effect failed: {error!r}")
