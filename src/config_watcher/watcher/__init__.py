"""Watcher – the refresh / report loops and their coordination."""
from config_watcher.watcher.cell import SnapshotCell
from config_watcher.watcher.coordinator import run
from config_watcher.watcher.group import run_until_first_error
from config_watcher.watcher.refresher import Refresher
from config_watcher.watcher.reporter import Reporter, print_snapshot
from config_watcher.watcher.rwlock import ReadWriteLock
from config_watcher.watcher.ticker import Ticker

__all__ = [
    "ReadWriteLock",
    "Refresher",
    "Reporter",
    "SnapshotCell",
    "Ticker",
    "print_snapshot",
    "run",
    "run_until_first_error",
]
