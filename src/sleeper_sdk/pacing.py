"""Minimum-spacing pacer for outbound requests."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

logger = logging.getLogger("sleeper_sdk.pacing")


class RequestPacer:
    """Keeps dispatch starts at least ``min_interval`` seconds apart.

    Not a token bucket: unused capacity from idle periods is never banked,
    so there are no bursts. The lock is held across the wait so concurrent
    callers on the same client line up one interval apart.
    """

    def __init__(self, min_interval: float) -> None:
        self.min_interval = min_interval
        self._last_dispatch: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def last_dispatch(self) -> Optional[float]:
        return self._last_dispatch

    async def acquire(self) -> None:
        async with self._lock:
            if self._last_dispatch is not None:
                elapsed = time.monotonic() - self._last_dispatch
                if elapsed < self.min_interval:
                    wait = self.min_interval - elapsed
                    logger.debug("Pacing request for %.4fs", wait)
                    await asyncio.sleep(wait)
            self._last_dispatch = time.monotonic()


__all__ = ["RequestPacer"]
