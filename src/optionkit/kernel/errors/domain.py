"""Domain errors — misuse of the Option model and absent-value extraction."""

from __future__ import annotations

from typing import Any

from optionkit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an Option rule is violated."""

    default_code = "domain_error"


class NoValuePresentError(DomainError, LookupError):
    """``get()`` was called on an absent option.

    This is the only failure the Option machinery raises for absence; every
    other extraction path (``get_or_else``, ``get_or_call``, ``get_or_raise``)
    is total.
    """

    default_code = "no_value_present"

    def __init__(self, message: str = "get() called on an empty option", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ValidationError(DomainError):
    """A value handed to an Option constructor or combinator is not acceptable.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class RecursiveResolutionError(DomainError):
    """A deferred producer tried to read the option it is producing."""

    default_code = "recursive_resolution"

    def __init__(self, producer: Any = None, **kwargs: Any) -> None:
        name = getattr(producer, "__qualname__", None) or repr(producer)
        super().__init__(f"Deferred producer {name} re-entered its own option", **kwargs)
        self.producer_name = name

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["producer"] = self.producer_name
        return base


NoValuePresent = NoValuePresentError

__all__ = [
    "DomainError",
    "NoValuePresent",
    "NoValuePresentError",
    "RecursiveResolutionError",
    "ValidationError",
]
