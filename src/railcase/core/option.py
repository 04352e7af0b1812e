"""Option sum type: a value that is present (``Some``) or absent (``NONE``).

``NONE`` is a single canonical instance. ``Some`` never holds ``None``; lift a
nullable value with ``from_nullable`` instead.

    >>> from_nullable({"a": 1}.get("a")).map(lambda x: x + 1)
    Some(2)
    >>> from_nullable({"a": 1}.get("b")).get_or_else(lambda: 0)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar, cast

from railcase.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
B = TypeVar("B")
C = TypeVar("C")


class Option(Generic[T]):
    """Discriminated union of ``Some(value)`` and ``NONE``.

    Immutable; no truthiness. ``match(on_none, on_some)`` is the unwrap
    boundary, with a zero-argument ``on_none``.
    """

    __slots__ = ("_value", "_is_some")

    _value: T | None
    _is_some: bool

    def __init__(self, value: T | None, is_some: bool) -> None:
        """Private constructor. Use Some() / NONE / from_nullable() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_some", is_some)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError("Option is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Option is immutable")

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    def unwrap(self) -> T:
        """Extract the value.

        Raises:
            UnwrapError: If Option is NONE
        """
        if self._is_some:
            return cast(T, self._value)
        raise UnwrapError("Called unwrap() on NONE", self)

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        return cast(T, self._value) if self._is_some else fallback()

    def map(self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply f to the value. A ``None`` returned by f becomes ``NONE``."""
        if self._is_some:
            return from_nullable(f(cast(T, self._value)))
        return cast(Option[U], self)

    def chain(self, f: Callable[[T], Option[U]]) -> Option[U]:
        if self._is_some:
            return f(cast(T, self._value))
        return cast(Option[U], self)

    flat_map = chain

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate holds."""
        if self._is_some and predicate(cast(T, self._value)):
            return self
        return cast(Option[T], NONE)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Alternative computed only when absent."""
        return self if self._is_some else f()

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        if self._is_some:
            f(cast(T, self._value))
        return self

    def match(self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """Total dispatch on presence."""
        if self._is_some:
            return on_some(cast(T, self._value))
        return on_none()

    def match_w(self, on_none: Callable[[], B], on_some: Callable[[T], C]) -> B | C:
        if self._is_some:
            return on_some(cast(T, self._value))
        return on_none()

    def to_result(self, on_none: Callable[[], E]) -> Result[T, E]:
        """Ok(value) if Some, otherwise Err(on_none()). The error must be re-supplied."""
        from .result import Err, Ok
        return Ok(cast(T, self._value)) if self._is_some else Err(on_none())

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "NONE"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_some, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        # Unpickling must hand back the canonical NONE
        return (from_nullable, (self._value,))


NONE: Option[Any] = Option(None, False)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option.

    Raises:
        ValueError: If value is None (use ``from_nullable``)
    """
    if value is None:
        raise ValueError("Some() cannot hold None; use from_nullable() or NONE")
    return Option(value, True)


def from_nullable(value: T | None) -> Option[T]:
    """NONE for ``None``, otherwise Some(value)."""
    return NONE if value is None else Option(value, True)


def is_some(option: Option[T]) -> bool:
    return option._is_some


def is_none(option: Option[T]) -> bool:
    return not option._is_some


def from_predicate(predicate: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    """Build a function returning Some(value) when predicate holds, else NONE."""
    def check(value: T) -> Option[T]:
        return from_nullable(value) if predicate(value) else cast(Option[T], NONE)
    return check
