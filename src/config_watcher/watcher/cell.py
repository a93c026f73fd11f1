"""Watcher – SnapshotCell: single-writer / multi-reader shared reference."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator, Generic, TypeVar

from config_watcher.watcher.rwlock import ReadWriteLock

T = TypeVar("T")


class SnapshotCell(Generic[T]):
    """Holds the current snapshot; replacement is atomic with respect to readers."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = ReadWriteLock()

    async def replace(self, snapshot: T) -> None:
        async with self._lock.write():
            self._value = snapshot

    async def read(self) -> T:
        async with self._lock.read():
            return self._value

    @contextlib.asynccontextmanager
    async def borrow(self) -> AsyncIterator[T]:
        """Yield the current snapshot while holding the read lock."""
        async with self._lock.read():
            yield self._value


__all__ = ["SnapshotCell"]
