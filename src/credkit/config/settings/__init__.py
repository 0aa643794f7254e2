"""Config settings – 12-factor env-based configuration."""
from credkit.config.settings.base import Settings
from credkit.config.settings.hashing import HashingSettings, SettingsProvider, load_hashing_settings
from credkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "EnvSettingsLoader",
    "HashingSettings",
    "Settings",
    "SettingsLoader",
    "SettingsProvider",
    "load_hashing_settings",
]
