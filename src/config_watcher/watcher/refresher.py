"""Watcher – Refresher: periodically replace the shared snapshot."""
from __future__ import annotations

import asyncio
from typing import Any

from config_watcher.config.loader import ConfigLoader
from config_watcher.config.snapshot import Config
from config_watcher.config.validation import RefreshError
from config_watcher.kernel.errors import BaseError
from config_watcher.observability.logging import get_logger
from config_watcher.watcher.cell import SnapshotCell
from config_watcher.watcher.ticker import Ticker

logger = get_logger(__name__)


class Refresher:
    """On every tick fetch a complete new snapshot and install it.

    The fetch runs outside the write lock; only the reference swap is
    exclusive. A failed fetch installs nothing and ends the loop with
    :class:`RefreshError` (no retry).
    """

    def __init__(
        self,
        cell: SnapshotCell[Any],
        loader: ConfigLoader,
        interval: float,
        *,
        config_cls: type[Any] = Config,
    ) -> None:
        self._cell = cell
        self._loader = loader
        self._interval = interval
        self._config_cls = config_cls
        self.refreshes = 0

    async def run(self, stop: asyncio.Event) -> None:
        ticker = Ticker(self._interval)
        while await ticker.wait(stop):
            try:
                snapshot = await self._loader.load(self._config_cls)
            except BaseError as exc:
                raise RefreshError(cause=exc) from exc
            await self._cell.replace(snapshot)
            self.refreshes += 1
            logger.debug("refresher.snapshot_replaced", refreshes=self.refreshes)


__all__ = ["Refresher"]
