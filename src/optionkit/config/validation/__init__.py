"""Config validation – error types."""
from optionkit.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
