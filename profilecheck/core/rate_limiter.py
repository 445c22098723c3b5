"""Per-key minimum-spacing rate limiter."""

import asyncio
import time
from collections.abc import Awaitable, Callable

from profilecheck.logging import get_logger


class RateLimiter:
    """
    Enforces a minimum spacing between consecutive acquires for each key.

    Callers sharing a key are serialized: the per-key lock is held across the
    check, the wait and the timestamp update, so concurrent acquires for the
    same platform are spaced against each other and not only against the
    previous sequential caller. Different keys never block each other.

    Example:
        limiter = RateLimiter(interval_ms=2000)
        await limiter.acquire("instagram")
    """

    def __init__(
        self,
        interval_ms: int = 2000,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize rate limiter.

        Args:
            interval_ms: Minimum spacing between acquires of the same key
            clock: Monotonic clock returning seconds
            sleep: Coroutine used to wait
        """
        self.interval = max(interval_ms, 0) / 1000
        self._clock = clock
        self._sleep = sleep
        self._last_call: dict[str, float] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._log = get_logger("rate_limiter")

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    async def acquire(self, key: str) -> None:
        """Wait until `key` may be used again, then record the use."""
        async with self._lock_for(key):
            last = self._last_call.get(key)
            if last is not None:
                remaining = self.interval - (self._clock() - last)
                if remaining > 0:
                    self._log.debug("rate_limit_wait", key=key, wait_ms=round(remaining * 1000))
                    await self._sleep(remaining)
            self._last_call[key] = self._clock()

    def last_call(self, key: str) -> float | None:
        """Clock reading of the most recent acquire for `key`."""
        return self._last_call.get(key)

    def reset(self, key: str | None = None) -> None:
        """Forget recorded timestamps for one key or for all keys."""
        if key is None:
            self._last_call.clear()
        else:
            self._last_call.pop(key, None)
