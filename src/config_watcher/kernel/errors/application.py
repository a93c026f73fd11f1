"""Application-layer errors: failures of the watcher's own use cases."""

from __future__ import annotations

from config_watcher.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
