"""Conversions between Result and Option.

Going Result -> Option loses the error by design; going back requires the
caller to supply one again:

    >>> get_right(Ok(5)), get_right(Err("x"))
    (Some(5), NONE)
    >>> from_option(lambda: "missing")(get_right(Err("x")))
    Err('missing')
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .option import Option
from .result import Result

T = TypeVar("T")
E = TypeVar("E")


def get_right(result: Result[T, E]) -> Option[T]:
    """Ok(a) -> Some(a), Err -> NONE."""
    return result.to_option()


to_option = get_right


def get_left(result: Result[T, E]) -> Option[E]:
    """Err(e) -> Some(e), Ok -> NONE."""
    return result.get_left()


def from_option(on_none: Callable[[], E]) -> Callable[[Option[T]], Result[T, E]]:
    """Lift an Option into a Result, producing the error with on_none when absent."""
    def convert(option: Option[T]) -> Result[T, E]:
        return option.to_result(on_none)
    return convert
