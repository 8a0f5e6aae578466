"""Kernel – the Option model and its error hierarchy."""

from optionkit.kernel.errors import (
    BaseError,
    DomainError,
    NoValuePresent,
    NoValuePresentError,
    RecursiveResolutionError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "NoValuePresent",
    "NoValuePresentError",
    "RecursiveResolutionError",
    "ValidationError",
]
