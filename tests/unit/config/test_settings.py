"""Unit tests for config settings & validation."""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from config_watcher.config.settings import (
    DEFAULT_INTERVAL_SECONDS,
    EnvSettingsLoader,
    Settings,
    WatcherSettings,
)
from config_watcher.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            settings = EnvSettingsLoader().load(AppSettings)
            assert settings.debug is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            settings = EnvSettingsLoader().load(AppSettings)
            assert settings.debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com,http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.debug is False
        assert settings.allowed_origins == []

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_PORT": "443"}).load(AppSettings)
        assert settings.port == 443

    def test_malformed_number_raises_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ={"APP_PORT": "eighty"}).load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"
        assert isinstance(exc_info.value, ConfigError)

    def test_missing_required_raises(self) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str = dataclasses.field()

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(StrictSettings)
        assert "STRICT_REQUIRED_FIELD" in str(exc_info.value)

    def test_constructor_failure_wrapped_in_config_error(self) -> None:
        @dataclass
        class Exploding(Settings):
            _prefix: ClassVar[str] = "BOOM"
            name: str = "x"

            def _validate(self) -> None:
                raise RuntimeError("kaput")

        with pytest.raises(ConfigError, match="kaput"):
            EnvSettingsLoader(environ={}).load(Exploding)


# ---------------------------------------------------------------------------
# Settings.env_key
# ---------------------------------------------------------------------------


class TestSettingsEnvKey:
    def test_prefixed_and_upper_cased(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"

    def test_watcher_prefix(self) -> None:
        assert WatcherSettings.env_key("log_json") == "CONFIG_WATCHER_LOG_JSON"

    def test_no_prefix(self) -> None:
        @dataclass
        class Bare(Settings):
            home: str = "/"

        assert Bare.env_key("home") == "HOME"
        assert EnvSettingsLoader(environ={"HOME": "/root"}).load(Bare).home == "/root"


# ---------------------------------------------------------------------------
# WatcherSettings
# ---------------------------------------------------------------------------


class TestWatcherSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(WatcherSettings)
        assert settings.interval == DEFAULT_INTERVAL_SECONDS == 5.0
        assert settings.log_level == "WARNING"
        assert settings.log_json is True

    def test_reads_prefixed_variables(self) -> None:
        environ = {
            "CONFIG_WATCHER_INTERVAL": "0.5",
            "CONFIG_WATCHER_LOG_LEVEL": "debug",
            "CONFIG_WATCHER_LOG_JSON": "false",
        }
        settings = EnvSettingsLoader(environ=environ).load(WatcherSettings)
        assert settings.interval == 0.5
        assert settings.log_level == "DEBUG"
        assert settings.log_json is False

    def test_log_level_number(self) -> None:
        assert WatcherSettings(log_level="info").log_level_number == logging.INFO

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_rejected(self, interval: float) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            WatcherSettings(interval=interval)
        assert exc_info.value.setting_name == "interval"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="log_level"):
            WatcherSettings(log_level="chatty")

    def test_invalid_value_from_environment_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"CONFIG_WATCHER_INTERVAL": "0"}).load(WatcherSettings)

    def test_resource_names_are_not_settings(self) -> None:
        names = {f.name for f in dataclasses.fields(WatcherSettings)}
        assert names == {"interval", "log_level", "log_json"}
