"""Infrastructure errors: identity and remote store failures."""

from __future__ import annotations

from typing import Any

from config_watcher.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a configuration rule violation."""

    default_code = "infrastructure_error"


class CredentialError(InfrastructureError):
    """The ambient identity could not be turned into a token credential."""

    default_code = "credential_error"

    def __init__(
        self,
        message: str = "failed to create azure credential",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class ExternalServiceError(InfrastructureError):
    """A remote store returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"{service} error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "CredentialError",
    "ExternalServiceError",
    "InfrastructureError",
]
