"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from optionkit.config.settings.base import Settings


class SettingsValidator:
    """Validate a populated settings instance."""

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages.

        A field may only be ``None`` when ``None`` is its declared default.
        """
        errors: list[str] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None and field.default is not None:
                errors.append(f"{field.name} must not be None")
        return errors


__all__ = ["SettingsValidator"]
