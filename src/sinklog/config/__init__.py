"""Config – environment-driven dispatcher settings and validation errors."""

from sinklog.config.settings import DispatcherSettings, EnvSettingsLoader, Settings, SettingsLoader
from sinklog.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DispatcherSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
