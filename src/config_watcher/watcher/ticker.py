"""Watcher – Ticker: fixed-rate timer that races a stop event."""
from __future__ import annotations

import asyncio


class Ticker:
    """Fire every *interval* seconds on a grid anchored at construction.

    If the consumer falls behind, missed ticks are dropped and the next
    :meth:`wait` returns immediately.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.interval = interval
        self._loop = asyncio.get_event_loop()
        self._next = self._loop.time()

    async def wait(self, stop: asyncio.Event) -> bool:
        """Return ``True`` on the next tick, ``False`` once *stop* is set."""
        if stop.is_set():
            return False
        now = self._loop.time()
        self._next += self.interval
        if self._next < now:
            self._next = now
        try:
            await asyncio.wait_for(stop.wait(), timeout=self._next - now)
        except asyncio.TimeoutError:
            return not stop.is_set()
        return False


__all__ = ["Ticker"]
