"""Config settings – 12-factor env-based configuration."""
from optionkit.config.settings.base import Settings
from optionkit.config.settings.library import OptionKitSettings
from optionkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from optionkit.config.settings.validator import SettingsValidator

__all__ = ["EnvSettingsLoader", "OptionKitSettings", "Settings", "SettingsLoader", "SettingsValidator"]
