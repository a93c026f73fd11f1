"""Watcher – Reporter: periodically print the current snapshot."""
from __future__ import annotations

import asyncio
import sys
from typing import Any, Callable

from config_watcher.config.snapshot import render
from config_watcher.observability.logging import get_logger
from config_watcher.watcher.cell import SnapshotCell
from config_watcher.watcher.ticker import Ticker

logger = get_logger(__name__)


def print_snapshot(text: str) -> None:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


class Reporter:
    """On every tick render the snapshot under the read lock, then emit it."""

    def __init__(
        self,
        cell: SnapshotCell[Any],
        interval: float,
        *,
        emit: Callable[[str], None] = print_snapshot,
        renderer: Callable[[Any], str] = render,
    ) -> None:
        self._cell = cell
        self._interval = interval
        self._emit = emit
        self._renderer = renderer
        self.reports = 0

    async def run(self, stop: asyncio.Event) -> None:
        ticker = Ticker(self._interval)
        while await ticker.wait(stop):
            async with self._cell.borrow() as snapshot:
                text = self._renderer(snapshot)
            self._emit(text)
            self.reports += 1
            logger.debug("reporter.snapshot_emitted", reports=self.reports)


__all__ = ["Reporter", "print_snapshot"]
