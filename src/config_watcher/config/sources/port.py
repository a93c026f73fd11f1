"""Config sources – SecretStore and SettingStore ports."""
from __future__ import annotations

import abc


class SecretStore(abc.ABC):
    """Port: read named secrets from a remote secret store."""

    @abc.abstractmethod
    async def get(self, name: str) -> str | None:
        """Return the secret value, or ``None`` when no such secret exists."""

    def close(self) -> None:
        """Release client resources. No-op by default."""


class SettingStore(abc.ABC):
    """Port: read keyed settings from a remote settings store."""

    @abc.abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the setting value, or ``None`` when no such key exists."""

    def close(self) -> None:
        """Release client resources. No-op by default."""


__all__ = ["SecretStore", "SettingStore"]
