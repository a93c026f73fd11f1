"""Observability – structured logging setup and helpers."""
from config_watcher.observability.logging.factory import LoggerFactory, get_logger
from config_watcher.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "LoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
