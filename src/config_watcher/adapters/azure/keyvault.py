"""Azure adapter – Key Vault secret store."""
from __future__ import annotations

import asyncio
from typing import Any

from azure.core.exceptions import AzureError, ResourceNotFoundError

from config_watcher.config.sources import SecretStore
from config_watcher.kernel.errors import ExternalServiceError
from config_watcher.observability.logging import get_logger

logger = get_logger(__name__)


def _require_keyvault() -> Any:
    try:
        import azure.keyvault.secrets  # noqa: PLC0415
        return azure.keyvault.secrets
    except ImportError as exc:
        raise ImportError("Install 'azure-keyvault-secrets' to use the Key Vault adapter") from exc


def vault_url(vault_name: str) -> str:
    return f"https://{vault_name}.vault.azure.net"


class KeyVaultSecretStore(SecretStore):
    """Azure Key Vault secret backend addressed by vault name."""

    def __init__(self, vault_name: str, credential: Any, **kwargs: Any) -> None:
        secrets = _require_keyvault()
        self.vault_name = vault_name
        self._client = secrets.SecretClient(vault_url=vault_url(vault_name), credential=credential, **kwargs)

    async def get(self, name: str) -> str | None:
        return await asyncio.get_event_loop().run_in_executor(None, self._sync_get, name)

    def _sync_get(self, name: str) -> str | None:
        try:
            secret = self._client.get_secret(name)
        except ResourceNotFoundError:
            logger.info("keyvault.secret_missing", vault=self.vault_name, secret_name=name)
            return None
        except AzureError as exc:
            raise ExternalServiceError(
                f"key vault '{self.vault_name}'",
                f"key vault '{self.vault_name}' error reading secret '{name}'",
                status_code=getattr(exc, "status_code", None),
                cause=exc,
            ) from exc
        return secret.value

    def close(self) -> None:
        self._client.close()


__all__ = ["KeyVaultSecretStore", "vault_url"]
