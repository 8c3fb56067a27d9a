"""Config settings – environment-driven configuration."""
from sinklog.config.settings.base import Settings
from sinklog.config.settings.dispatcher import DispatcherSettings
from sinklog.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DispatcherSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
