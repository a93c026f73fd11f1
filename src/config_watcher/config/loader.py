"""Config – ConfigLoader: assemble a snapshot from the secret and settings stores."""
from __future__ import annotations

import asyncio
from typing import Any, TypeVar

from config_watcher.config.snapshot import FieldBinding, ResourceKind, bindings
from config_watcher.config.sources import SecretStore, SettingStore
from config_watcher.config.validation import ConfigFetchError

T = TypeVar("T")

KEY_VAULT_NAME = "kv-lab-sc-azcfg"
APP_CONFIGURATION_NAME = "ac-lab-sc-azcfg"


class ConfigLoader:
    """Fetch every bound field of a snapshot class and build one new instance.

    All fields are resolved concurrently. A value absent from its store is
    left as ``""``; any other store failure aborts the whole load so that no
    partially populated snapshot is ever returned.
    """

    def __init__(self, secrets: SecretStore, settings: SettingStore) -> None:
        self._secrets = secrets
        self._settings = settings

    async def load(self, config_cls: type[T]) -> T:
        declared = bindings(config_cls)
        try:
            values = await asyncio.gather(*(self._resolve(b) for b in declared))
        except Exception as exc:
            raise ConfigFetchError(cause=exc) from exc
        return config_cls(**{b.attribute: v for b, v in zip(declared, values)})

    async def _resolve(self, binding: FieldBinding) -> str:
        if binding.kind is ResourceKind.SECRET:
            value = await self._secrets.get(binding.key)
        else:
            value = await self._settings.get(binding.key)
        return "" if value is None else value

    def close(self) -> None:
        self._secrets.close()
        self._settings.close()


def build_loader(credential: Any) -> ConfigLoader:
    """Wire the Azure stores for the fixed vault and configuration store names."""
    from config_watcher.adapters.azure import (  # noqa: PLC0415
        AppConfigurationSettingStore,
        KeyVaultSecretStore,
    )

    return ConfigLoader(
        KeyVaultSecretStore(KEY_VAULT_NAME, credential),
        AppConfigurationSettingStore(APP_CONFIGURATION_NAME, credential),
    )


__all__ = ["APP_CONFIGURATION_NAME", "KEY_VAULT_NAME", "ConfigLoader", "build_loader"]
