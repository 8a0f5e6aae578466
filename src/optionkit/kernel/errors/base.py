"""BaseError — common shape of every error optionkit raises itself.

Errors raised by caller-supplied functions (mappers, predicates, producers)
are never wrapped in these classes; they reach the caller unchanged.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the optionkit error hierarchy.

    Subclasses set ``default_code`` (``no_value_present``, ``config_error``...)
    so log pipelines can key on the failure kind without parsing messages.

    Args:
        message: What went wrong, e.g. which option operation failed.
        code: Overrides the subclass ``default_code``.
        detail: Extra context; must be JSON-serialisable for ``__str__``.
        cause: Exception this error was raised from (sets ``__cause__``).
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return ``code``, ``message``, ``detail`` (and ``cause``) as a dict for structured logs."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
