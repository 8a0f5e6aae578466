"""Config settings – OptionKitSettings, read from ``OPTIONKIT_*`` variables."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from optionkit.config.settings.base import Settings
from optionkit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class OptionKitSettings(Settings):
    """Runtime switches for the library.

    Attributes:
        trace_resolution: Debug-log every ``Deferred`` resolution and producer
            failure.
        log_level: stdlib level name applied when ``json_logs`` is enabled.
        json_logs: Let :func:`optionkit.config.configure` install the
            structlog JSON pipeline.
    """

    _prefix: ClassVar[str] = "OPTIONKIT"

    trace_resolution: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = level

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


__all__ = ["OptionKitSettings"]
