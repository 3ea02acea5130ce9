"""Process-lifetime single-flight cache for an async producer.

``SingleFlight`` wraps a zero-argument coroutine function. The first call
starts it; calls arriving while it runs await the same outcome; a
successful result is kept for the rest of the process. A failure is not
kept: the cache returns to ``EMPTY`` and the next call starts over.

Usage::

    cache = SingleFlight(JavaDiscovery().discover)
    installs = await cache()
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheState(Enum):
    """Lifecycle of a ``SingleFlight`` cache."""

    EMPTY = "empty"
    IN_FLIGHT = "in-flight"
    RESOLVED = "resolved"


class SingleFlight(Generic[T]):
    """Run an async producer at most once successfully and memoize the result."""

    def __init__(self, producer: Callable[[], Awaitable[T]]) -> None:
        self._producer = producer
        self._pending: asyncio.Future[T] | None = None
        self._value: T | None = None
        self._state = CacheState.EMPTY

    @property
    def state(self) -> CacheState:
        return self._state

    async def __call__(self) -> T:
        if self._state is CacheState.RESOLVED:
            return self._value  # type: ignore[return-value]
        if self._pending is None:
            self._state = CacheState.IN_FLIGHT
            self._pending = asyncio.ensure_future(self._run())
        # Shielded so one caller's cancellation does not cancel the shared run.
        return await asyncio.shield(self._pending)

    async def _run(self) -> T:
        try:
            result = await self._producer()
        except asyncio.CancelledError:
            self._reset()
            raise
        except Exception:
            logger.warning("Producer failed; cache reset for retry", exc_info=True)
            self._reset()
            raise
        self._value = result
        self._state = CacheState.RESOLVED
        self._pending = None
        return result

    def _reset(self) -> None:
        self._state = CacheState.EMPTY
        self._pending = None
