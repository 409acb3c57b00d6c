"""Minimum-spacing throttle shared by every provider call in a process."""

import asyncio
import time
from typing import Awaitable, Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


class RequestThrottle:
    """
    Enforces a minimum interval between outbound provider calls.

    One instance is created per process and handed to every fetcher, so all
    symbols share a single clock. Concurrent waiters are serialized by a lock;
    each acquisition records the call time once, after any wait and before
    the caller issues its request.
    """

    def __init__(
        self,
        min_interval_seconds: float = 12.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if min_interval_seconds < 0:
            raise ValueError("min_interval_seconds must be non-negative")

        self.min_interval_seconds = min_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock: Optional[asyncio.Lock] = None
        self._last_call: Optional[float] = None
        self.total_wait_seconds = 0.0
        self.call_count = 0

    @property
    def last_call(self) -> Optional[float]:
        """Clock reading of the most recent call, None before the first."""
        return self._last_call

    def remaining(self) -> float:
        """Seconds until the next call is eligible."""
        if self._last_call is None:
            return 0.0
        elapsed = self._clock() - self._last_call
        return max(0.0, self.min_interval_seconds - elapsed)

    async def acquire(self) -> float:
        """
        Wait until a call is eligible and claim the slot.

        Returns:
            Seconds spent waiting
        """
        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            waited = 0.0
            delay = self.remaining()
            while delay > 0:
                logger.info("Rate limiting: waiting before next API call",
                            wait_seconds=round(delay, 3))
                await self._sleep(delay)
                waited += delay
                delay = self.remaining()

            self._last_call = self._clock()
            self.call_count += 1
            self.total_wait_seconds += waited
            return waited

    def reset(self) -> None:
        """Forget the previous call so the next one proceeds immediately."""
        self._last_call = None
