"""Option[T] — Some and Nothing variants.

``Option`` is the abstract contract; ``Some`` carries exactly one value and
``Nothing`` is the process-wide absent value. A third variant,
:class:`~optionkit.kernel.types.deferred.Deferred`, resolves itself into one
of these two on first use.

Examples::

    Some(5).map(lambda x: x * 2).get_or_else(0)      # 10
    NOTHING.map(lambda x: x * 2).get_or_else(0)      # 0
    Some(5).filter(lambda x: x > 3).is_defined()     # True
"""

from __future__ import annotations

import abc
from typing import Any, Callable, ClassVar, Generic, Iterator, NoReturn, TypeVar, Union, final

from optionkit.kernel.errors.domain import NoValuePresentError, ValidationError

T = TypeVar("T")
U = TypeVar("U")


def _ensure_option(result: object, where: str) -> "Option[Any]":
    if not isinstance(result, Option):
        raise TypeError(f"{where} must return an Option, got {type(result).__name__}")
    return result


def _check_alternative(alternative: object) -> None:
    if not isinstance(alternative, Option) and not callable(alternative):
        raise TypeError(
            f"or_else expects an Option or a callable, got {type(alternative).__name__}"
        )


class Option(abc.ABC, Generic[T]):
    """A value that may or may not be present.

    The variant set is closed: :class:`Some`, :class:`Nothing` and
    :class:`~optionkit.kernel.types.deferred.Deferred`. Every combinator
    below behaves identically on all three; a ``Deferred`` is observed only
    through its resolved form.

    ``Option`` has no truth value. ``if opt:`` raises ``TypeError`` so that
    "absent" is never confused with "present but falsy".
    """

    __slots__ = ()

    # -- state -------------------------------------------------------------

    @abc.abstractmethod
    def is_defined(self) -> bool:
        """Return ``True`` when a value is present."""

    def is_empty(self) -> bool:
        """Return ``True`` when no value is present."""
        return not self.is_defined()

    # -- transformation ----------------------------------------------------

    @abc.abstractmethod
    def map(self, func: Callable[[T], U | None]) -> "Option[U]":
        """Apply *func* to the value; a ``None`` result becomes ``NOTHING``."""

    @abc.abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Apply *func* to the value and return its Option unchanged."""

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only when *predicate* holds."""

    @abc.abstractmethod
    def or_else(self, alternative: Alternative[T]) -> "Option[T]":
        """Return self when present, otherwise *alternative*.

        *alternative* is either an Option or a zero-argument callable
        returning one; the callable runs only when self is empty.
        """

    # -- extraction --------------------------------------------------------

    @abc.abstractmethod
    def get(self) -> T:
        """Return the value or raise :class:`NoValuePresentError`."""

    @abc.abstractmethod
    def get_or_else(self, default: U) -> T | U:
        """Return the value or the already-built *default*."""

    @abc.abstractmethod
    def get_or_call(self, supplier: Callable[[], U]) -> T | U:
        """Return the value or ``supplier()``, calling it only when empty."""

    @abc.abstractmethod
    def get_or_raise(self, exc_supplier: Callable[[], BaseException]) -> T:
        """Return the value or raise the exception built by *exc_supplier*."""

    def to_nullable(self) -> T | None:
        """Return the value, or ``None`` when empty."""
        return self.get_or_else(None)

    # -- predicates and side effects ---------------------------------------

    @abc.abstractmethod
    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Return ``True`` iff a value is present and satisfies *predicate*."""

    @abc.abstractmethod
    def if_defined(self, consumer: Callable[[T], Any]) -> None:
        """Call *consumer* with the value when present."""

    def for_all(self, consumer: Callable[[T], Any]) -> None:
        """Alias of :meth:`if_defined`."""
        self.if_defined(consumer)

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    def __bool__(self) -> NoReturn:
        raise TypeError(
            f"{type(self).__name__} has no truth value; use is_defined() or is_empty()"
        )


Alternative = Union[Option[T], Callable[[], Option[T]]]


@final
class Some(Option[T]):
    """Option with a value.

    The value is fixed at construction and may not be ``None``; build
    absent options with :data:`NOTHING` or :func:`from_nullable`.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise ValidationError("Some() cannot hold None; use NOTHING or from_nullable()")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Some is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Some is immutable; cannot delete {name!r}")

    @property
    def value(self) -> T:
        return self._value

    def is_defined(self) -> bool:
        return True

    def map(self, func: Callable[[T], U | None]) -> Option[U]:
        result = func(self._value)
        if result is None:
            return NOTHING
        return Some(result)

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return _ensure_option(func(self._value), "flat_map function")

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self._value) else NOTHING

    def or_else(self, alternative: Alternative[T]) -> Option[T]:
        _check_alternative(alternative)
        return self

    def get(self) -> T:
        return self._value

    def get_or_else(self, default: U) -> T:  # noqa: ARG002
        return self._value

    def get_or_call(self, supplier: Callable[[], U]) -> T:  # noqa: ARG002
        return self._value

    def get_or_raise(self, exc_supplier: Callable[[], BaseException]) -> T:  # noqa: ARG002
        return self._value

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self._value))

    def if_defined(self, consumer: Callable[[T], Any]) -> None:
        consumer(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (Some, (self._value,))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing(Option[T]):
    """Empty option.

    There is exactly one instance: ``Nothing()``, ``Nothing[int]()``,
    :data:`NOTHING` and copies or unpickled copies of any of them are all the
    same object, so ``opt is NOTHING`` is a valid emptiness check.
    """

    __slots__ = ()

    _instance: ClassVar[Nothing[Any] | None] = None

    def __new__(cls) -> Nothing[Any]:
        instance = cls._instance
        if instance is None:
            instance = super().__new__(cls)
            cls._instance = instance
        return instance

    def is_defined(self) -> bool:
        return False

    def map(self, func: Callable[[T], U | None]) -> Option[U]:  # noqa: ARG002
        return self

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:  # noqa: ARG002
        return self

    def or_else(self, alternative: Alternative[T]) -> Option[T]:
        _check_alternative(alternative)
        if isinstance(alternative, Option):
            return alternative
        return _ensure_option(alternative(), "or_else supplier")

    def get(self) -> NoReturn:
        raise NoValuePresentError()

    def get_or_else(self, default: U) -> U:
        return default

    def get_or_call(self, supplier: Callable[[], U]) -> U:
        return supplier()

    def get_or_raise(self, exc_supplier: Callable[[], BaseException]) -> NoReturn:
        raise exc_supplier()

    def exists(self, predicate: Callable[[T], bool]) -> bool:  # noqa: ARG002
        return False

    def if_defined(self, consumer: Callable[[T], Any]) -> None:  # noqa: ARG002
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Some, Nothing)):
            return other is self
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Nothing)

    def __copy__(self) -> Nothing[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing[T]:  # noqa: ARG002
        return self

    def __reduce__(self) -> str:
        return "NOTHING"

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Nothing[Any] = Nothing()


def nothing() -> Nothing[Any]:
    """Return the shared empty option."""
    return NOTHING


__all__ = ["NOTHING", "Nothing", "Option", "Some", "nothing"]
