"""Kernel – error hierarchy shared by every layer."""

from config_watcher.kernel.errors import (
    ApplicationError,
    BaseError,
    CredentialError,
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CredentialError",
    "ExternalServiceError",
    "InfrastructureError",
]
