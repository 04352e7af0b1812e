"""Pipeable combinators that work on every container.

Each function takes the transformation first and returns a one-argument
function expecting the container, which is the shape ``pipe`` and ``flow``
need. Dispatch is structural: the container's own method does the work, so
the same ``map`` serves ``Result``, ``Option``, ``Task`` and ``TaskResult``.

    >>> from railcase import Ok, pipe
    >>> pipe(Ok(2), map(lambda x: x + 1), chain(lambda x: Ok(x * 10)),
    ...      match(lambda e: f"error: {e}", lambda v: f"value: {v}"))
    'value: 30'

For ``Option`` the first ``match`` handler takes no arguments.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from railcase.core.protocols import Chainable, ErrorMappable, Fallible, Mappable, Matchable, WideChainable

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
G = TypeVar("G")

__all__ = [
    "map", "chain", "flat_map", "chain_w", "map_error", "map_left", "bimap",
    "match", "match_w", "get_or_else",
]


def _require(container: object, protocol: type, op: str) -> None:
    if not isinstance(container, protocol):
        raise TypeError(f"{type(container).__name__} does not support {op}()")


def map(f: Callable[[A], B]) -> Callable[[Any], Any]:  # noqa: A001
    """Pipeable ``container.map(f)``."""
    def apply(container: Any) -> Any:
        _require(container, Mappable, "map")
        return container.map(f)
    return apply


def chain(f: Callable[[A], Any]) -> Callable[[Any], Any]:
    """Pipeable ``container.chain(f)``; f returns a container of the same kind."""
    def apply(container: Any) -> Any:
        _require(container, Chainable, "chain")
        return container.chain(f)
    return apply


flat_map = chain


def chain_w(f: Callable[[A], Any]) -> Callable[[Any], Any]:
    """Pipeable ``container.chain_w(f)``: chain with error type widening."""
    def apply(container: Any) -> Any:
        _require(container, WideChainable, "chain_w")
        return container.chain_w(f)
    return apply


def map_error(f: Callable[[E], G]) -> Callable[[Any], Any]:
    """Pipeable ``container.map_error(f)``."""
    def apply(container: Any) -> Any:
        _require(container, ErrorMappable, "map_error")
        return container.map_error(f)
    return apply


map_left = map_error


def bimap(ok_fn: Callable[[A], B], err_fn: Callable[[E], G]) -> Callable[[Any], Any]:
    def apply(container: Any) -> Any:
        _require(container, ErrorMappable, "bimap")
        return container.bimap(ok_fn, err_fn)
    return apply


def match(on_err: Callable[..., B], on_ok: Callable[[A], B]) -> Callable[[Any], Any]:
    """Pipeable ``container.match(on_err, on_ok)``, normally the last stage."""
    def apply(container: Any) -> Any:
        _require(container, Matchable, "match")
        return container.match(on_err, on_ok)
    return apply


def match_w(on_err: Callable[..., Any], on_ok: Callable[[A], Any]) -> Callable[[Any], Any]:
    def apply(container: Any) -> Any:
        _require(container, Matchable, "match_w")
        return container.match_w(on_err, on_ok)
    return apply


def get_or_else(fallback: Callable[[], A]) -> Callable[[Any], Any]:
    """Pipeable ``container.get_or_else(fallback)``."""
    def apply(container: Any) -> Any:
        _require(container, Fallible, "get_or_else")
        return container.get_or_else(fallback)
    return apply
