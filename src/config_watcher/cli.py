"""Process entry point: settings, logging, coordinator, exit status."""
from __future__ import annotations

import asyncio
import sys
from typing import IO

from config_watcher.config.settings import EnvSettingsLoader, WatcherSettings
from config_watcher.observability.logging import LoggerFactory
from config_watcher.watcher import run


def _one_line(exc: BaseException) -> str:
    return " ".join(str(exc).split()) or type(exc).__name__


def main(stderr: IO[str] | None = None) -> int:
    """Run the watcher; return 0 on clean shutdown, 1 on any failure."""
    stderr = stderr or sys.stderr
    try:
        settings = EnvSettingsLoader().load(WatcherSettings)
        LoggerFactory.configure(settings.log_level_number, json=settings.log_json)
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        return 0
    except Exception as exc:  # noqa: BLE001 - reported as the exit status
        stderr.write(_one_line(exc) + "\n")
        stderr.flush()
        return 1
    return 0


__all__ = ["main"]
