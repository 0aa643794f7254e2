"""Config – 12-factor settings and loaders."""

from credkit.config.settings import (
    EnvSettingsLoader,
    HashingSettings,
    Settings,
    SettingsLoader,
    load_hashing_settings,
)
from credkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HashingSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_hashing_settings",
]
