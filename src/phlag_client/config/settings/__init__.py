"""Config settings – 12-factor env-based configuration."""
from phlag_client.config.settings.base import PhlagSettings, Settings
from phlag_client.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "PhlagSettings", "Settings", "SettingsLoader"]
