"""Azure adapter – credential, Key Vault and App Configuration stores."""
from config_watcher.adapters.azure.appconfig import AppConfigurationSettingStore
from config_watcher.adapters.azure.credential import new_default_credential
from config_watcher.adapters.azure.keyvault import KeyVaultSecretStore

__all__ = ["AppConfigurationSettingStore", "KeyVaultSecretStore", "new_default_credential"]
