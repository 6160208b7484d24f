"""Config – 12-factor settings and loaders."""

from phonecanon.config.settings import (
    EnvSettingsLoader,
    ParserSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_settings,
)
from phonecanon.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ParserSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
