"""Config – snapshot model, remote loading, process settings."""

from config_watcher.config.loader import (
    APP_CONFIGURATION_NAME,
    KEY_VAULT_NAME,
    ConfigLoader,
    build_loader,
)
from config_watcher.config.settings import EnvSettingsLoader, Settings, WatcherSettings
from config_watcher.config.snapshot import Config, FieldBinding, ResourceKind, bindings, render
from config_watcher.config.sources import SecretStore, SettingStore
from config_watcher.config.validation import (
    ConfigError,
    ConfigFetchError,
    MissingRequiredSettingError,
    RefreshError,
)

__all__ = [
    "APP_CONFIGURATION_NAME",
    "KEY_VAULT_NAME",
    "Config",
    "ConfigError",
    "ConfigFetchError",
    "ConfigLoader",
    "EnvSettingsLoader",
    "FieldBinding",
    "MissingRequiredSettingError",
    "RefreshError",
    "ResourceKind",
    "SecretStore",
    "SettingStore",
    "Settings",
    "WatcherSettings",
    "bindings",
    "build_loader",
    "render",
]
