"""Config sources – remote store ports."""
from config_watcher.config.sources.port import SecretStore, SettingStore

__all__ = ["SecretStore", "SettingStore"]
