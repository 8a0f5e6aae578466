"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from optionkit.config.settings.base import Settings
from optionkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    ``environ`` defaults to :data:`os.environ`; tests pass a plain dict.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ if self._environ is not None else os.environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidSettingValueError(key, value, "expected a boolean")
        if type_hint is int or type_hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(key, value, "expected an integer") from exc
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
