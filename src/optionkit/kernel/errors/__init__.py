"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── DomainError                  (domain.py)
        ├── NoValuePresentError      (also a LookupError)
        ├── ValidationError
        └── RecursiveResolutionError
"""

from optionkit.kernel.errors.base import BaseError
from optionkit.kernel.errors.domain import (
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
