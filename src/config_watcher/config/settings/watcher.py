"""Config settings – WatcherSettings for the refresh/report loops."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
import logging

from config_watcher.config.settings.base import Settings
from config_watcher.config.validation import InvalidSettingValueError

DEFAULT_INTERVAL_SECONDS = 5.0

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class WatcherSettings(Settings):
    """Process-level knobs, read from ``CONFIG_WATCHER_*`` variables.

    The Key Vault and App Configuration names are constants of
    :mod:`config_watcher.config.loader` and cannot be overridden here.
    """

    _prefix: ClassVar[str] = "CONFIG_WATCHER"

    interval: float = DEFAULT_INTERVAL_SECONDS
    log_level: str = "WARNING"
    log_json: bool = True

    def _validate(self) -> None:
        if self.interval <= 0:
            raise InvalidSettingValueError("interval", self.interval, "must be positive")
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        self.log_level = level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["DEFAULT_INTERVAL_SECONDS", "WatcherSettings"]
