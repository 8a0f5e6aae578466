"""Config – process-wide settings holder.

Settings are read from the environment on first use and cached. Invalid
``OPTIONKIT_*`` values are logged once and replaced by the defaults, so a
bad variable never reaches option operations. Call
:func:`configure` to install explicit settings (and the JSON logging
pipeline when ``json_logs`` is on).
"""
from __future__ import annotations

import threading

from optionkit.config.settings import (
    EnvSettingsLoader,
    OptionKitSettings,
    SettingsLoader,
    SettingsValidator,
)
from optionkit.config.validation import ConfigError
from optionkit.observability.logging import JsonLoggerFactory, Logger, get_logger

_log: Logger = get_logger(__name__)

_lock = threading.Lock()
_settings: OptionKitSettings | None = None


def get_settings() -> OptionKitSettings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    current = _settings
    if current is not None:
        return current
    with _lock:
        if _settings is None:
            try:
                _settings = EnvSettingsLoader().load(OptionKitSettings)
            except ConfigError as exc:
                _log.warning(
                    "optionkit_settings_invalid",
                    code=exc.code,
                    error=exc.message,
                    fallback="defaults",
                )
                _settings = OptionKitSettings()
        return _settings


def configure(
    settings: OptionKitSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
) -> OptionKitSettings:
    """Install *settings* (or load them with *loader*) as the active settings."""
    global _settings
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(OptionKitSettings)
    errors = SettingsValidator().validate(settings)
    if errors:
        raise ConfigError("Invalid optionkit settings", detail={"errors": errors})
    if settings.json_logs:
        JsonLoggerFactory.configure(level=settings.level_number)
    with _lock:
        _settings = settings
    return settings


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    global _settings
    with _lock:
        _settings = None


__all__ = ["configure", "get_settings", "reset_settings"]
