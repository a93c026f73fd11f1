"""Azure adapter – ambient token credential."""
from __future__ import annotations

from typing import Any

from config_watcher.kernel.errors import CredentialError


def _require_identity() -> Any:
    try:
        import azure.identity  # noqa: PLC0415
        return azure.identity
    except ImportError as exc:
        raise ImportError("Install 'azure-identity' to resolve Azure credentials") from exc


def new_default_credential(**kwargs: Any) -> Any:
    """Build a ``DefaultAzureCredential`` from the process environment.

    Token acquisition is deferred to the first remote call; only failures to
    construct the credential chain surface here, as :class:`CredentialError`.
    """
    identity = _require_identity()
    try:
        return identity.DefaultAzureCredential(**kwargs)
    except Exception as exc:
        raise CredentialError(cause=exc) from exc


__all__ = ["new_default_credential"]
