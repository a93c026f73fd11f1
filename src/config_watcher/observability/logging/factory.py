"""Observability – LoggerFactory (structlog over the stdlib root logger)."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from config_watcher.observability.logging.filters import SensitiveFieldsFilter


def azure_sdk_level(level: int) -> int:
    """Level for the ``azure`` logger tree given the process log level.

    azure-core logs every HTTP request at INFO, and azure-identity logs a
    WARNING before raising when no credential in its chain yields a token.
    At WARNING and above the SDK is silenced entirely: its failures reach
    the caller as exceptions, and stderr carries only the final error line.
    Verbose levels still let SDK warnings through.
    """
    if level >= logging.WARNING:
        return logging.CRITICAL + 1
    return logging.WARNING


class LoggerFactory:
    """Configure structlog to render through a single stdlib handler.

    Log output goes to standard error so that standard output carries only
    the rendered snapshots.
    """

    @staticmethod
    def configure(
        level: int = logging.WARNING,
        *,
        json: bool = True,
        sensitive_fields: frozenset[str] | None = None,
        stream: IO[str] | None = None,
    ) -> logging.Handler:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            SensitiveFieldsFilter(sensitive_fields),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        logging.getLogger("azure").setLevel(azure_sdk_level(level))
        return handler


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["LoggerFactory", "azure_sdk_level", "get_logger"]
