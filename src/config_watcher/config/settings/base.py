"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for process settings read from prefixed variables.

    Subclasses set ``_prefix``; field ``interval`` of a class with prefix
    ``CONFIG_WATCHER`` is read from ``CONFIG_WATCHER_INTERVAL``. Validation
    runs on construction, so an instance is always valid.
    """

    _prefix: ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject invalid values with ``InvalidSettingValueError``."""


__all__ = ["Settings"]
