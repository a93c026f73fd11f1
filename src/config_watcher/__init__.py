"""
config_watcher – keep an application's configuration fresh from Azure.

A background refresher rebuilds the configuration snapshot from Key Vault
and App Configuration on a fixed interval; a reporter prints the current
snapshot on the same interval. Import path convention::

    from config_watcher.config import Config, ConfigLoader
    from config_watcher.watcher import SnapshotCell, run
    from config_watcher.adapters.azure import KeyVaultSecretStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
