"""Azure adapter – App Configuration setting store."""
from __future__ import annotations

import asyncio
from typing import Any

from azure.core.exceptions import AzureError, ResourceNotFoundError

from config_watcher.config.sources import SettingStore
from config_watcher.kernel.errors import ExternalServiceError
from config_watcher.observability.logging import get_logger

logger = get_logger(__name__)


def _require_appconfiguration() -> Any:
    try:
        import azure.appconfiguration  # noqa: PLC0415
        return azure.appconfiguration
    except ImportError as exc:
        raise ImportError(
            "Install 'azure-appconfiguration' to use the App Configuration adapter"
        ) from exc


def store_url(store_name: str) -> str:
    return f"https://{store_name}.azconfig.io"


class AppConfigurationSettingStore(SettingStore):
    """Azure App Configuration backend addressed by store name.

    Settings are read with *label* (``None`` reads the unlabelled value).
    """

    def __init__(
        self,
        store_name: str,
        credential: Any,
        *,
        label: str | None = None,
        **kwargs: Any,
    ) -> None:
        appconfiguration = _require_appconfiguration()
        self.store_name = store_name
        self.label = label
        self._client = appconfiguration.AzureAppConfigurationClient(
            base_url=store_url(store_name), credential=credential, **kwargs
        )

    async def get(self, key: str) -> str | None:
        return await asyncio.get_event_loop().run_in_executor(None, self._sync_get, key)

    def _sync_get(self, key: str) -> str | None:
        try:
            setting = self._client.get_configuration_setting(key=key, label=self.label)
        except ResourceNotFoundError:
            logger.info("appconfig.setting_missing", store=self.store_name, key=key, label=self.label)
            return None
        except AzureError as exc:
            raise ExternalServiceError(
                f"app configuration '{self.store_name}'",
                f"app configuration '{self.store_name}' error reading key '{key}'",
                status_code=getattr(exc, "status_code", None),
                cause=exc,
            ) from exc
        return setting.value

    def close(self) -> None:
        self._client.close()


__all__ = ["AppConfigurationSettingStore", "store_url"]
