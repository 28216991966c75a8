"""Rate limiter for live requests to the schedule provider.

One limiter exists per host, so the boards of all preceding stops share
the same spacing even when they are fetched concurrently.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Enforces a minimum delay between requests to one host."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, host: str, min_delay_seconds: float = 0.5) -> None:
        """Initialize the rate limiter.

        Args:
            host: Host name the limiter guards (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.host = host
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    async def get_instance(cls, host: str, min_delay_seconds: float = 0.5) -> ApiRateLimiter:
        """Get or create the shared limiter of a host."""
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            if host not in cls._instances:
                cls._instances[host] = cls(host, min_delay_seconds)
                logger.debug(f"Created rate limiter for {host} with {min_delay_seconds}s minimum delay")
            return cls._instances[host]

    @classmethod
    def reset(cls) -> None:
        """Forget every registered limiter."""
        cls._instances.clear()
        cls._registry_lock = None

    async def acquire(self) -> None:
        """Wait until enough time has passed since the previous request."""
        async with self._lock:
            elapsed = time.monotonic() - self._last_request_time
            wait_time = self.min_delay_seconds - elapsed

            if wait_time > 0:
                logger.debug(f"{self.host}: waiting {wait_time:.2f}s before next request")
                await asyncio.sleep(wait_time)

            self._last_request_time = time.monotonic()
