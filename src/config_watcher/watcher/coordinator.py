"""Watcher – coordinator: bootstrap shared state and supervise both loops.

Startup order::

    signal handlers -> credential -> loader -> SnapshotCell(Config())
        -> Refresher.run + Reporter.run  (shared stop event)

A credential failure aborts before anything else is created. Every resource
acquired is released on the way out, whichever way the run ends. A failing
close is logged at debug and never replaces the error that ended the run.
"""
from __future__ import annotations

import asyncio
import contextlib
import signal
from functools import partial
from typing import Any, Callable

from config_watcher.adapters.azure import new_default_credential
from config_watcher.config.loader import (
    APP_CONFIGURATION_NAME,
    KEY_VAULT_NAME,
    ConfigLoader,
    build_loader,
)
from config_watcher.config.settings import WatcherSettings
from config_watcher.config.snapshot import Config
from config_watcher.observability.logging import get_logger
from config_watcher.watcher.cell import SnapshotCell
from config_watcher.watcher.group import run_until_first_error
from config_watcher.watcher.refresher import Refresher
from config_watcher.watcher.reporter import Reporter, print_snapshot

logger = get_logger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _on_signal(stop: asyncio.Event, sig: signal.Signals) -> None:
    logger.info("watcher.signal_received", signal=sig.name)
    stop.set()


def _close(resource: Any) -> None:
    close = getattr(resource, "close", None)
    if not callable(close):
        return
    try:
        close()
    except Exception as exc:  # noqa: BLE001 - must not mask the run outcome
        logger.debug("watcher.close_failed", resource=type(resource).__name__, error=str(exc))


async def run(
    settings: WatcherSettings,
    *,
    credential_factory: Callable[[], Any] = new_default_credential,
    loader_factory: Callable[[Any], ConfigLoader] = build_loader,
    emit: Callable[[str], None] = print_snapshot,
    handle_signals: bool = True,
    stop: asyncio.Event | None = None,
) -> None:
    """Run the refresher and reporter until stopped or until one fails.

    Returns on clean shutdown; raises the first loop error otherwise.
    """
    stop = stop or asyncio.Event()
    loop = asyncio.get_event_loop()

    with contextlib.ExitStack() as cleanup:
        if handle_signals:
            for sig in STOP_SIGNALS:
                loop.add_signal_handler(sig, partial(_on_signal, stop, sig))
                cleanup.callback(loop.remove_signal_handler, sig)

        credential = credential_factory()
        cleanup.callback(_close, credential)

        loader = loader_factory(credential)
        cleanup.callback(_close, loader)

        cell: SnapshotCell[Config] = SnapshotCell(Config())
        refresher = Refresher(cell, loader, settings.interval)
        reporter = Reporter(cell, settings.interval, emit=emit)

        logger.info(
            "watcher.starting",
            interval=settings.interval,
            key_vault=KEY_VAULT_NAME,
            app_configuration=APP_CONFIGURATION_NAME,
        )
        await run_until_first_error(stop, refresher.run, reporter.run)
        logger.info("watcher.stopped", refreshes=refresher.refreshes, reports=reporter.reports)


__all__ = ["STOP_SIGNALS", "run"]
