"""TaskResult: a Task whose eventual value is a Result.

``TaskResult[T, E]`` wraps a ``Task[Result[T, E]]`` and lifts the Result
combinators over the async boundary. Once a step resolves to ``Err``, every
later step is skipped without being invoked:

    >>> import asyncio
    >>> tr = (
    ...     TaskResult.ok(5)
    ...     .chain(lambda n: TaskResult.err("too small") if n < 10 else TaskResult.ok(n))
    ...     .map(lambda n: n * 2)
    ... )
    >>> asyncio.run(tr())
    Err('too small')

``try_catch`` is the single place native exceptions are captured. Everything
else in this module assumes the Tasks it composes never raise.
"""

from __future__ import annotations

import functools
from typing import Awaitable, Callable, Generic, NoReturn, ParamSpec, TypeVar, cast

from pydantic import ValidationError

from railcase.core.option import Option
from railcase.core.result import Err, Ok, Result
from railcase.foundation.config import BridgeSettings, get_settings
from railcase.foundation.errors import BoundaryError
from railcase.observability import get_logger

from .interop import run_sync
from .task import Task

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
B = TypeVar("B")
C = TypeVar("C")
P = ParamSpec("P")

logger = get_logger("bridge")


class TaskResult(Generic[T, E]):
    """Deferred computation resolving to ``Result[T, E]``.

    Not a new primitive: ``tr.task`` is the underlying ``Task`` and ``tr()``
    is the same as ``tr.task()``.
    """

    __slots__ = ("_task",)

    _task: Task[Result[T, E]]

    def __init__(self, task: Task[Result[T, E]] | Callable[[], Awaitable[Result[T, E]]]) -> None:
        object.__setattr__(self, "_task", task if isinstance(task, Task) else Task(task))

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError("TaskResult is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("TaskResult is immutable")

    def __call__(self) -> Awaitable[Result[T, E]]:
        return self._task()

    @property
    def task(self) -> Task[Result[T, E]]:
        return self._task

    # ─────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def ok(cls, value: T) -> TaskResult[T, E]:
        return cls(Task.of(Ok(value)))

    @classmethod
    def err(cls, error: E) -> TaskResult[T, E]:
        return cls(Task.of(Err(error)))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> TaskResult[T, E]:
        return cls(Task.of(result))

    @classmethod
    def from_task(cls, task: Task[T]) -> TaskResult[T, E]:
        """Lift a never-failing Task onto the success track."""
        return cls(task.map(Ok))

    # ─────────────────────────────────────────────────────────────────
    # Functor / bifunctor
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> TaskResult[U, E]:
        return TaskResult(self._task.map(lambda r: r.map(f)))

    def map_error(self, f: Callable[[E], F]) -> TaskResult[T, F]:
        return TaskResult(self._task.map(lambda r: r.map_error(f)))

    map_left = map_error

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> TaskResult[U, F]:
        return TaskResult(self._task.map(lambda r: r.bimap(ok_fn, err_fn)))

    # ─────────────────────────────────────────────────────────────────
    # Sequencing
    # ─────────────────────────────────────────────────────────────────

    def chain(self, f: Callable[[T], TaskResult[U, E]]) -> TaskResult[U, E]:
        """Run this step, then the TaskResult f builds from an Ok value.

        On Err, f is not called and no further Task is invoked.
        """
        thunk = self._task

        async def run() -> Result[U, E]:
            result = await thunk()
            if result.is_err():
                return cast(Result[U, E], result)
            return await f(result.unwrap())()
        return TaskResult(run)

    flat_map = chain

    def chain_w(self, f: Callable[[T], TaskResult[U, F]]) -> TaskResult[U, E | F]:
        """``chain`` whose step may fail with a different error type; errors widen to ``E | F``."""
        return cast("TaskResult[U, E | F]", self.chain(cast(Callable[[T], TaskResult[U, E]], f)))

    def chain_result_k(self, f: Callable[[T], Result[U, E]]) -> TaskResult[U, E]:
        """Chain a synchronous Result-returning function into the async pipeline."""
        return TaskResult(self._task.map(lambda r: r.chain(f)))

    def chain_result_kw(self, f: Callable[[T], Result[U, F]]) -> TaskResult[U, E | F]:
        """``chain_result_k`` with error type widening."""
        return TaskResult(self._task.map(lambda r: r.chain_w(f)))

    def chain_task_k(self, f: Callable[[T], Task[U]]) -> TaskResult[U, E]:
        """Chain a never-failing Task; its value lands on the success track."""
        return self.chain(lambda value: TaskResult.from_task(f(value)))

    def or_else(self, f: Callable[[E], TaskResult[T, F]]) -> TaskResult[T, F]:
        """Recover from Err with another TaskResult; Ok passes through."""
        thunk = self._task

        async def run() -> Result[T, F]:
            result = await thunk()
            if result.is_ok():
                return cast(Result[T, F], result)
            return await f(result.unwrap_err())()
        return TaskResult(run)

    def inspect(self, f: Callable[[T], object]) -> TaskResult[T, E]:
        return TaskResult(self._task.map(lambda r: r.inspect(f)))

    def inspect_err(self, f: Callable[[E], object]) -> TaskResult[T, E]:
        return TaskResult(self._task.map(lambda r: r.inspect_err(f)))

    # ─────────────────────────────────────────────────────────────────
    # Unwrap boundary (results stay deferred)
    # ─────────────────────────────────────────────────────────────────

    def match(self, on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> Task[U]:
        """Task resolving to whichever handler applies."""
        return self._task.map(lambda r: r.match(on_err, on_ok))

    def match_w(self, on_err: Callable[[E], B], on_ok: Callable[[T], C]) -> Task[B | C]:
        return self._task.map(lambda r: r.match_w(on_err, on_ok))

    def get_or_else(self, fallback: Callable[[], T]) -> Task[T]:
        return self._task.map(lambda r: r.get_or_else(fallback))

    def run_sync(self) -> Result[T, E]:
        """Invoke and block until resolved; for synchronous callers."""
        return run_sync(self._task)

    def __repr__(self) -> str:
        return f"TaskResult({self._task!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Module-level constructors
# ═════════════════════════════════════════════════════════════════════════════


def ok(value: T) -> TaskResult[T, E]:
    return TaskResult.ok(value)


def err(error: E) -> TaskResult[T, E]:
    return TaskResult.err(error)


def from_option(on_none: Callable[[], E]) -> Callable[[Option[T]], TaskResult[T, E]]:
    """Lift an Option, producing the error with on_none when absent."""
    def convert(option: Option[T]) -> TaskResult[T, E]:
        return TaskResult.from_result(option.to_result(on_none))
    return convert


def from_predicate(predicate: Callable[[T], bool], on_false: Callable[[], E]) -> Callable[[T], TaskResult[T, E]]:
    """Async counterpart of ``railcase.core.result.from_predicate``."""
    def check(value: T) -> TaskResult[T, E]:
        return TaskResult.ok(value) if predicate(value) else TaskResult.err(on_false())
    return check


# ═════════════════════════════════════════════════════════════════════════════
# Bridge from native fallible async calls
# ═════════════════════════════════════════════════════════════════════════════


def _bridge_settings() -> BridgeSettings:
    # Invalid RAILCASE_* values anywhere must not escape through the bridge
    try:
        return get_settings().bridge
    except ValidationError as e:
        logger.warning(
            "invalid railcase settings; using bridge defaults",
            extra={"errors": e.error_count()},
        )
        return BridgeSettings.model_construct()


def _default_on_rejected(exc: Exception) -> BoundaryError:
    return BoundaryError.from_exception(exc, include_trace=_bridge_settings().capture_traceback)


def _capture(exc: Exception, on_rejected: Callable[[Exception], E]) -> Result[T, E | BoundaryError]:
    try:
        error: E | BoundaryError = on_rejected(exc)
    except Exception as mapper_exc:
        # A failing mapper must not reopen the exception channel
        logger.warning(
            "on_rejected mapper raised; falling back to BoundaryError",
            extra={"exception_type": type(mapper_exc).__name__},
        )
        error = BoundaryError.from_exception(exc)
    if _bridge_settings().log_captured:
        logger.debug(
            "captured boundary failure",
            extra={"exception_type": type(exc).__name__, "error": repr(error)},
        )
    return Err(error)


def try_catch(
    thunk: Callable[[], Awaitable[T]],
    on_rejected: Callable[[Exception], E] = _default_on_rejected,  # type: ignore[assignment]
) -> TaskResult[T, E]:
    """Wrap a native async call that may raise into a TaskResult that never does.

    The awaitable's value becomes ``Ok``; any ``Exception`` becomes
    ``Err(on_rejected(exc))``. ``on_rejected`` defaults to
    ``BoundaryError.from_exception``. Cancellation (``asyncio.CancelledError``
    is a ``BaseException``) is not captured.

    Example:
        >>> async def fetch() -> str:
        ...     raise OSError("network unreachable")
        >>> import asyncio
        >>> asyncio.run(try_catch(fetch, lambda _: "network-error")())
        Err('network-error')
    """
    async def run() -> Result[T, E]:
        try:
            value = await thunk()
        except Exception as e:
            return cast(Result[T, E], _capture(e, on_rejected))
        return Ok(value)
    return TaskResult(run)


def try_catch_k(
    fn: Callable[P, Awaitable[T]],
    on_rejected: Callable[[Exception], E] = _default_on_rejected,  # type: ignore[assignment]
) -> Callable[P, TaskResult[T, E]]:
    """Turn an async function that may raise into one returning a TaskResult.

    Arguments are bound at call time; the native call itself is deferred
    until the returned TaskResult is invoked.
    """
    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> TaskResult[T, E]:
        return try_catch(lambda: fn(*args, **kwargs), on_rejected)
    return wrapper
