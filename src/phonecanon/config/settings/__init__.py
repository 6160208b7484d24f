"""Config settings – 12-factor env-based configuration."""
from phonecanon.config.settings.base import Settings
from phonecanon.config.settings.factory import SettingsFactory
from phonecanon.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from phonecanon.config.settings.parser import ParserSettings, load_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ParserSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
