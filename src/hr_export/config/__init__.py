"""Config – 12-factor settings and loaders."""

from hr_export.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from hr_export.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsFactory, SettingsLoader
from hr_export.config.settings import SUPPORTED_FORMATS, ExportSettings, Settings

__all__ = [
    "SUPPORTED_FORMATS",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
