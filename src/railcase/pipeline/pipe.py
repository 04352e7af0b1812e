"""Left-to-right function composition.

``pipe`` pushes a value through a sequence of unary functions right now;
``flow`` builds the same sequence as a reusable function without running
anything.

    >>> pipe(3, lambda x: x + 1, lambda x: x * 2)
    8
    >>> double_then_str = flow(lambda x: x * 2, str)
    >>> double_then_str(21)
    '42'

A stage returning a ``Task`` passes the ``Task`` itself on; invoking it is up
to the caller. Each stage's output must be the exact input of the next one.
The overloads check this statically for up to nine stages; longer pipelines
are accepted but unchecked.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, overload

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")


def identity(value: A) -> A:
    return value


def constant(value: A) -> Callable[..., A]:
    """Function ignoring its arguments and returning value."""
    def const(*_: object, **__: object) -> A:
        return value
    return const


@overload
def pipe(a: A) -> A: ...
@overload
def pipe(a: A, ab: Callable[[A], B]) -> B: ...
@overload
def pipe(a: A, ab: Callable[[A], B], bc: Callable[[B], C]) -> C: ...
@overload
def pipe(a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D]) -> D: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
) -> E: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F],
) -> F: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G],
) -> G: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H],
) -> H: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
) -> I: ...
@overload
def pipe(
    a: A, ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    ij: Callable[[I], J], *rest: Callable[[Any], Any],
) -> Any: ...


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Apply fns to value left to right: ``pipe(x, f, g) == g(f(x))``."""
    for fn in fns:
        value = fn(value)
    return value


@overload
def flow(ab: Callable[..., B]) -> Callable[..., B]: ...
@overload
def flow(ab: Callable[..., B], bc: Callable[[B], C]) -> Callable[..., C]: ...
@overload
def flow(ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D]) -> Callable[..., D]: ...
@overload
def flow(
    ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
) -> Callable[..., E]: ...
@overload
def flow(
    ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F],
) -> Callable[..., F]: ...
@overload
def flow(
    ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G],
) -> Callable[..., G]: ...
@overload
def flow(
    ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H],
) -> Callable[..., H]: ...
@overload
def flow(
    ab: Callable[..., B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    *rest: Callable[[Any], Any],
) -> Callable[..., Any]: ...


def flow(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose fns left to right into one function; nothing runs until it is called.

    The first function may take any arguments, the rest must be unary.

    Raises:
        TypeError: If no functions are given
    """
    if not fns:
        raise TypeError("flow() requires at least one function")
    first, rest = fns[0], fns[1:]

    def composed(*args: Any, **kwargs: Any) -> Any:
        value = first(*args, **kwargs)
        for fn in rest:
            value = fn(value)
        return value

    composed.__name__ = "_then_".join(getattr(fn, "__name__", "fn") for fn in fns)
    return composed
