"""Deferred[T] — an Option computed on first use and memoised.

The producer runs at most once successfully, even when several threads hit
an unresolved instance at the same time. A producer that raises leaves the
option unresolved; the next access calls it again.

Examples::

    config = Deferred(lambda: os.environ.get("API_URL"))
    config.map(urlparse).get_or_else(DEFAULT_URL)   # producer runs here
    config.is_defined()                             # cached, no second call
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Iterator, TypeVar

from optionkit.config import get_settings
from optionkit.kernel.errors.domain import RecursiveResolutionError, ValidationError
from optionkit.kernel.types.option import NOTHING, Alternative, Option, Some
from optionkit.observability.logging import Logger, get_logger

T = TypeVar("T")
U = TypeVar("U")

_log: Logger = get_logger(__name__)


def _producer_name(producer: Any) -> str:
    return getattr(producer, "__qualname__", None) or repr(producer)


def _classify(result: Any) -> Option[Any]:
    """Turn a producer result into Some or NOTHING."""
    if isinstance(result, Deferred):
        return result._resolve()
    if isinstance(result, Option):
        return result
    if result is None:
        return NOTHING
    return Some(result)


class Deferred(Option[T]):
    """Option whose presence and value come from a zero-argument producer.

    Every operation resolves the option first and then forwards to the
    resolved ``Some``/``NOTHING``. The producer may return a plain value,
    ``None`` (absent) or another Option, which is adopted as-is.
    """

    __slots__ = ("_lock", "_producer", "_resolved", "_resolving")

    def __init__(self, producer: Callable[[], T | Option[T] | None]) -> None:
        if not callable(producer):
            raise ValidationError(
                f"Deferred producer must be callable, got {type(producer).__name__}"
            )
        self._producer: Callable[[], Any] | None = producer
        self._resolved: Option[T] | None = None
        self._resolving = False
        self._lock = threading.RLock()

    def _resolve(self) -> Option[T]:
        resolved = self._resolved
        if resolved is not None:
            return resolved
        with self._lock:
            if self._resolved is None:
                if self._resolving:
                    raise RecursiveResolutionError(self._producer)
                self._resolving = True
                try:
                    self._resolved = self._produce()
                finally:
                    self._resolving = False
                self._producer = None
            return self._resolved

    def _produce(self) -> Option[T]:
        producer = self._producer
        trace = get_settings().trace_resolution
        try:
            result = producer()  # type: ignore[misc]
        except Exception as exc:
            if trace:
                _log.debug(
                    "deferred_producer_failed",
                    producer=_producer_name(producer),
                    error=type(exc).__name__,
                )
            raise
        resolved = _classify(result)
        if trace:
            _log.debug(
                "deferred_resolved",
                producer=_producer_name(producer),
                outcome="some" if resolved.is_defined() else "nothing",
            )
        return resolved

    def is_defined(self) -> bool:
        return self._resolve().is_defined()

    def map(self, func: Callable[[T], U | None]) -> Option[U]:
        return self._resolve().map(func)

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return self._resolve().flat_map(func)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self._resolve().filter(predicate)

    def or_else(self, alternative: Alternative[T]) -> Option[T]:
        return self._resolve().or_else(alternative)

    def get(self) -> T:
        return self._resolve().get()

    def get_or_else(self, default: U) -> T | U:
        return self._resolve().get_or_else(default)

    def get_or_call(self, supplier: Callable[[], U]) -> T | U:
        return self._resolve().get_or_call(supplier)

    def get_or_raise(self, exc_supplier: Callable[[], BaseException]) -> T:
        return self._resolve().get_or_raise(exc_supplier)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return self._resolve().exists(predicate)

    def if_defined(self, consumer: Callable[[T], Any]) -> None:
        self._resolve().if_defined(consumer)

    def __iter__(self) -> Iterator[T]:
        return iter(self._resolve())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._resolve() == other

    def __hash__(self) -> int:
        return hash(self._resolve())

    def __repr__(self) -> str:
        resolved = self._resolved
        if resolved is None:
            return "Deferred(<pending>)"
        return repr(resolved)


def deferred(producer: Callable[[], T | Option[T] | None]) -> Deferred[T]:
    """Wrap *producer* in a :class:`Deferred`; usable as a decorator.

    Example::

        @deferred
        def current_user() -> User | None:
            return session.get("user")

        current_user.map(lambda u: u.name).get_or_else("anonymous")
    """
    return Deferred(producer)


__all__ = ["Deferred", "deferred"]
