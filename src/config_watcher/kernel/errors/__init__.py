"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── CredentialError
        └── ExternalServiceError
"""

from config_watcher.kernel.errors.application import ApplicationError
from config_watcher.kernel.errors.base import BaseError
from config_watcher.kernel.errors.infrastructure import (
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
