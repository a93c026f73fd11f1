"""Watcher – run loops together, stopping all of them on the first failure."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from config_watcher.observability.logging import get_logger

logger = get_logger(__name__)

Loop = Callable[[asyncio.Event], Awaitable[None]]


async def run_until_first_error(stop: asyncio.Event, *loops: Loop) -> None:
    """Run every loop as a task sharing *stop* and wait for all of them.

    The first loop to raise sets *stop*, which ends the others at their next
    wait. That first error is re-raised once every task has finished; later
    errors are only logged. A loop returning normally does not set *stop*.
    """
    errors: list[Exception] = []

    async def _guard(loop: Loop) -> None:
        try:
            await loop(stop)
        except Exception as exc:
            if errors:
                logger.debug("watcher.subsequent_error", error=repr(exc))
            errors.append(exc)
            stop.set()

    tasks = [asyncio.create_task(_guard(loop)) for loop in loops]
    try:
        await asyncio.gather(*tasks)
    except asyncio.CancelledError:
        stop.set()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    if errors:
        raise errors[0]


__all__ = ["Loop", "run_until_first_error"]
