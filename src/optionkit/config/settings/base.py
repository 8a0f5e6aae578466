"""Config settings – Settings base class for env-backed dataclasses."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass read by :class:`EnvSettingsLoader`.

    ``_prefix`` names the environment prefix (``OPTIONKIT`` gives
    ``OPTIONKIT_<FIELD>``); ``_validate`` runs after construction and raises
    :class:`InvalidSettingValueError` for unusable values.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for subclasses; the base class accepts everything."""


__all__ = ["Settings"]
