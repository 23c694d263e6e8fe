"""Config settings – 12-factor env-based configuration."""
from generic_sqla.config.settings.base import DatabaseSettings, Settings
from generic_sqla.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader, env_key

__all__ = [
    "DatabaseSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "env_key",
]
