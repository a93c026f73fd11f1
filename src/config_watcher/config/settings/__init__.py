"""Config settings – 12-factor env-based configuration."""
from config_watcher.config.settings.base import Settings
from config_watcher.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from config_watcher.config.settings.watcher import DEFAULT_INTERVAL_SECONDS, WatcherSettings

__all__ = [
    "DEFAULT_INTERVAL_SECONDS",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "WatcherSettings",
]
