"""Config – 12-factor settings and loaders."""

from optionkit.config.runtime import configure, get_settings, reset_settings
from optionkit.config.settings import (
    EnvSettingsLoader,
    OptionKitSettings,
    Settings,
    SettingsLoader,
    SettingsValidator,
)
from optionkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OptionKitSettings",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
    "configure",
    "get_settings",
    "reset_settings",
]
