"""Implementation of an opt-in shared rate limiter.

Controls the frequency of outgoing requests across every request chain that
shares one instance. Uses a simple sliding window algorithm. Executors only
consult it when one is configured on the client.
"""

import time
import asyncio
import logging
from collections import deque
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUESTS = 3000  # SportMonks default entity budget per hour...
DEFAULT_TIME_WINDOW_SECONDS = 3600  # ...per 3600 seconds


class RateLimiter:
    """Simple sliding window rate limiter."""

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        time_window: float = DEFAULT_TIME_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initializes the rate limiter.

        Args:
            max_requests: Maximum number of requests allowed in the time window.
            time_window: The time window in seconds.
            clock: Monotonic clock, injectable for tests.
            sleep: Awaitable sleep, injectable for tests.
        """
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        self.max_requests = max_requests
        self.time_window = time_window
        self.timestamps = deque()
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        logger.info(f"RateLimiter initialized: {max_requests} requests / {time_window} seconds")

    def _cleanup_timestamps(self) -> None:
        """Removes timestamps older than the time window."""
        now = self._clock()
        while self.timestamps and now - self.timestamps[0] >= self.time_window:
            self.timestamps.popleft()

    def _wait_time_locked(self) -> float:
        self._cleanup_timestamps()
        if len(self.timestamps) < self.max_requests:
            return 0.0
        return max(0.0, self.timestamps[0] + self.time_window - self._clock())

    async def wait_for_permission(self) -> None:
        """Waits until a request is permitted according to the rate limit."""
        while True:
            async with self._lock:
                wait_time = self._wait_time_locked()
                if wait_time <= 0 and len(self.timestamps) < self.max_requests:
                    self.timestamps.append(self._clock())
                    logger.debug("Rate limit permission granted.")
                    return

            logger.debug(f"Rate limit reached. Waiting for {wait_time:.2f} seconds.")
            await self._sleep(wait_time)

    async def get_wait_time(self) -> float:
        """Estimates the time needed before the next request can be made."""
        async with self._lock:
            return self._wait_time_locked()
