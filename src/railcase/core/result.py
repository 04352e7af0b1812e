"""Result/Either sum type for explicit, propagate-by-default error handling.

A ``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``. Every combinator
except ``match`` passes an ``Err`` through untouched, so a chain of fallible
steps needs no branching until the final ``match``:

    >>> def parse(s: str) -> Result[int, str]:
    ...     return Ok(int(s)) if s.isdigit() else Err(f"not a number: {s}")
    >>> def positive(n: int) -> Result[int, str]:
    ...     return Ok(n) if n > 0 else Err("must be positive")
    >>> Ok("42").chain(parse).chain(positive).map(lambda n: n * 2)
    Ok(84)
    >>> Ok("x").chain(parse).chain(positive).match(lambda e: e, str)
    'not a number: x'

``chain_w`` is ``chain`` with a widened error type: the callback may fail
with a different error type ``F`` and the result is typed ``Result[U, E | F]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, cast

from railcase.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from .option import Option

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped / widened error type
B = TypeVar("B")
C = TypeVar("C")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Built only through ``Ok()`` and ``Err()``. The tag and payload are fixed
    at construction; assigning attributes afterwards raises
    ``AttributeError``.

    There is deliberately no ``__bool__`` and no ``__iter__``: the only ways
    to reach the payload are ``match``, ``get_or_else``/``unwrap_or*`` (which
    force a fallback) and the loud ``unwrap`` family.
    """

    __slots__ = ("_value", "_is_ok")

    _value: T | E
    _is_ok: bool

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─────────────────────────────────────────────────────────────────
    # Variant checks
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            UnwrapError: If Result is Err (the Err is attached to the exception)
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"Called unwrap() on Err value: {self._value!r}", self)

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(f"Called unwrap_err() on Ok value: {self._value!r}", self)

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        """Extract Ok value or compute a fallback; the error is not consulted."""
        return cast(T, self._value) if self._is_ok else fallback()

    # ─────────────────────────────────────────────────────────────────
    # Functor / bifunctor
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the Ok value; an Err is returned as is.

        f must not fail. If it can, use ``chain``.
        """
        if self._is_ok:
            return Result(f(cast(T, self._value)), _OK)
        return cast(Result[U, E], self)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the Err value; an Ok is returned as is."""
        if not self._is_ok:
            return Result(f(cast(E, self._value)), _ERR)
        return cast(Result[T, F], self)

    map_left = map_error

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Map both sides: ok_fn if Ok, err_fn if Err."""
        if self._is_ok:
            return Result(ok_fn(cast(T, self._value)), _OK)
        return Result(err_fn(cast(E, self._value)), _ERR)

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def chain(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: replace Ok with the Result f returns, short-circuit on Err.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U, E], self)

    flat_map = chain

    def chain_w(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Width-merging bind: like ``chain`` but f may fail with another error type.

        Type signature: Result[T, E] -> (T -> Result[U, F]) -> Result[U, E | F]

        The error object itself is never wrapped or coerced, so each distinct
        cause stays distinguishable at ``match``.
        """
        if self._is_ok:
            return cast("Result[U, E | F]", f(cast(T, self._value)))
        return cast("Result[U, E | F]", self)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err with another Result; an Ok passes through."""
        if not self._is_ok:
            return f(cast(E, self._value))
        return cast(Result[T, F], self)

    def flatten(self: Result[Result[U, E], E]) -> Result[U, E]:
        """Result[Result[U, E], E] -> Result[U, E]"""
        if self._is_ok:
            return cast(Result[U, E], self._value)
        return cast(Result[U, E], self)

    # ─────────────────────────────────────────────────────────────────
    # Side effects
    # ─────────────────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with the Ok value for side effects, return self."""
        if self._is_ok:
            f(cast(T, self._value))
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with the Err value for side effects, return self."""
        if not self._is_ok:
            f(cast(E, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Unwrap boundary
    # ─────────────────────────────────────────────────────────────────

    def match(self, on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> U:
        """Total dispatch: exactly one handler runs and its value is returned.

        Example:
            >>> Ok(42).match(lambda e: f"failed: {e}", lambda x: f"success: {x}")
            'success: 42'
        """
        if self._is_ok:
            return on_ok(cast(T, self._value))
        return on_err(cast(E, self._value))

    def match_w(self, on_err: Callable[[E], B], on_ok: Callable[[T], C]) -> B | C:
        """``match`` whose handlers may return different types."""
        if self._is_ok:
            return on_ok(cast(T, self._value))
        return on_err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_option(self) -> Option[T]:
        """Some(value) if Ok, NONE if Err. The error is dropped."""
        from .option import NONE, from_nullable
        return from_nullable(cast(T, self._value)) if self._is_ok else NONE

    def get_left(self) -> Option[E]:
        """Some(error) if Err, NONE if Ok."""
        from .option import NONE, from_nullable
        return NONE if self._is_ok else from_nullable(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder methods
    # ─────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __reduce__(self) -> tuple[object, ...]:
        # Slots plus a blocking __setattr__ rule out the default pickle protocol
        return (Result, (self._value, self._is_ok))


# ═════════════════════════════════════════════════════════════════════════════
# Constructors & predicates
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def is_ok(result: Result[T, E]) -> bool:
    return result._is_ok


def is_err(result: Result[T, E]) -> bool:
    return not result._is_ok


def from_predicate(predicate: Callable[[T], bool], on_false: Callable[[], E]) -> Callable[[T], Result[T, E]]:
    """Build a function testing a bare value: Ok(value) if predicate holds, else Err(on_false()).

    Example:
        >>> positive = from_predicate(lambda n: n > 0, lambda: "not positive")
        >>> positive(3), positive(-1)
        (Ok(3), Err('not positive'))
    """
    def check(value: T) -> Result[T, E]:
        return Result(value, _OK) if predicate(value) else Result(on_false(), _ERR)
    return check


def try_catch_sync(fn: Callable[[], T], on_throw: Callable[[Exception], E]) -> Result[T, E]:
    """Synchronous bridge: run fn, converting a raised exception into Err(on_throw(exc))."""
    try:
        return Result(fn(), _OK)
    except Exception as e:
        return Result(on_throw(e), _ERR)


# ═════════════════════════════════════════════════════════════════════════════
# Collection operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: list[Result[T, E]]) -> Result[list[T], E]:
    """Convert list of Results to Result of list, failing on the first Err.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> sequence([Ok(1), Err("fail"), Err("later")])
        Err('fail')
    """
    values: list[T] = []
    for result in results:
        if not result._is_ok:
            return cast(Result[list[T], E], result)
        values.append(cast(T, result._value))
    return Result(values, _OK)


def traverse(items: list[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items and sequence. Stops calling f after the first Err."""
    values: list[U] = []
    for item in items:
        result = f(item)
        if not result._is_ok:
            return cast(Result[list[U], E], result)
        values.append(cast(U, result._value))
    return Result(values, _OK)


def collect_results(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error instead of failing fast.

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result._is_ok:
            values.append(cast(T, result._value))
        else:
            errors.append(cast(E, result._value))
    return Result(values, _OK) if not errors else Result(errors, _ERR)
