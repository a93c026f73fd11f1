"""Config validation errors."""
from config_watcher.config.validation.errors import (
    ConfigError,
    ConfigFetchError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RefreshError,
)

__all__ = [
    "ConfigError",
    "ConfigFetchError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RefreshError",
]
