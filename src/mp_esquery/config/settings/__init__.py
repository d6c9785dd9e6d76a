"""Config settings – 12-factor env-based configuration."""
from mp_esquery.config.settings.base import Settings
from mp_esquery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
