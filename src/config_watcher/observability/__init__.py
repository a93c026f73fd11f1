"""Observability – logging."""

from config_watcher.observability.logging import LoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = ["LoggerFactory", "SensitiveFieldsFilter", "get_logger"]
