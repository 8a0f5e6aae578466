"""Nullable bridge — the one conversion point between ``None`` and Option."""

from __future__ import annotations

from typing import TypeVar

from optionkit.kernel.types.option import NOTHING, Option, Some

T = TypeVar("T")


def from_nullable(value: T | None) -> Option[T]:
    """Return ``Some(value)``, or ``NOTHING`` when *value* is ``None``.

    Falsy values (``0``, ``""``, ``[]``) are present.
    """
    if value is None:
        return NOTHING
    return Some(value)


def to_nullable(option: Option[T]) -> T | None:
    """Return the value held by *option*, or ``None`` when it is empty."""
    return option.to_nullable()


__all__ = ["from_nullable", "to_nullable"]
