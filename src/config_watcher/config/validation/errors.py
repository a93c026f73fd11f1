"""Config validation errors."""
from config_watcher.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ConfigFetchError(ConfigError):
    """A snapshot could not be assembled from the remote stores."""
    default_code = "config_fetch_failed"

    def __init__(self, message: str = "failed to parse config", **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class RefreshError(ConfigError):
    """The refresher could not produce a new snapshot; fatal for the process."""
    default_code = "refresh_failed"

    def __init__(self, message: str = "failed to create config", **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


__all__ = [
    "ConfigError",
    "ConfigFetchError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RefreshError",
]
