"""Errors raised while loading or validating ``OPTIONKIT_*`` settings.

:func:`optionkit.config.get_settings` logs these and falls back to defaults;
:func:`optionkit.config.configure` lets them propagate.
"""
from optionkit.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """An environment variable is set but cannot be used (bad bool, level name...)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
