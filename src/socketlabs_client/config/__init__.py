"""Config – client settings, their loaders and configuration errors."""
from socketlabs_client.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from socketlabs_client.config.settings import (
    DEFAULT_ENDPOINT_URL,
    ClientSettings,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "ClientSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsLoader",
]
