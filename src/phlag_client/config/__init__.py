"""Config – 12-factor settings and loaders."""

from phlag_client.config.settings import EnvSettingsLoader, PhlagSettings, Settings, SettingsLoader
from phlag_client.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PhlagSettings",
    "Settings",
    "SettingsLoader",
]
