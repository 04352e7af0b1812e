"""Task: a lazy, repeatable, never-failing asynchronous computation.

A ``Task[T]`` wraps a zero-argument function returning an awaitable. Building
a Task (and every combinator on it) does no work; calling it starts a fresh
run:

    >>> import asyncio
    >>> t = Task.of(20).map(lambda x: x + 1).chain(lambda x: Task.of(x * 2))
    >>> asyncio.run(t())
    42

A Task must never raise through its awaitable. Failure belongs in the value
(see ``TaskResult``); exceptions from native code are captured once by
``railcase.runtime.task_result.try_catch``.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, NoReturn, TypeVar

from .interop import run_sync

T = TypeVar("T")
U = TypeVar("U")


class Task(Generic[T]):
    """Deferred computation producing exactly one ``T`` per invocation.

    Invocations are independent: state is shared only if the wrapped thunk
    captures it. Re-invoking is indistinguishable from a first attempt.
    """

    __slots__ = ("_thunk",)

    _thunk: Callable[[], Awaitable[T]]

    def __init__(self, thunk: Callable[[], Awaitable[T]]) -> None:
        object.__setattr__(self, "_thunk", thunk)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError("Task is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Task is immutable")

    def __call__(self) -> Awaitable[T]:
        """Start a new run and return its awaitable."""
        return self._thunk()

    # ─────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def of(cls, value: T) -> Task[T]:
        """Task resolving to value."""
        async def run() -> T:
            return value
        return cls(run)

    @classmethod
    def from_io(cls, fn: Callable[[], T]) -> Task[T]:
        """Task calling a synchronous, non-failing fn on each invocation."""
        async def run() -> T:
            return fn()
        return cls(run)

    # ─────────────────────────────────────────────────────────────────
    # Combinators
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Task[U]:
        """Task applying f to this Task's eventual value."""
        async def run() -> U:
            return f(await self._thunk())
        return Task(run)

    def chain(self, f: Callable[[T], Task[U]]) -> Task[U]:
        """Run this Task, then the Task f builds from its value.

        The second computation starts only after the first resolves.
        """
        async def run() -> U:
            return await f(await self._thunk())()
        return Task(run)

    flat_map = chain

    def chain_first(self, f: Callable[[T], Task[object]]) -> Task[T]:
        """Run f's Task for its effect after this one, keeping this Task's value."""
        async def run() -> T:
            value = await self._thunk()
            await f(value)()
            return value
        return Task(run)

    def delay(self, seconds: float) -> Task[T]:
        """Task that sleeps for seconds before starting this one."""
        async def run() -> T:
            await asyncio.sleep(seconds)
            return await self._thunk()
        return Task(run)

    def run_sync(self) -> T:
        """Invoke and block until resolved; for synchronous callers."""
        return run_sync(self._thunk)

    def __repr__(self) -> str:
        return f"Task({getattr(self._thunk, '__qualname__', repr(self._thunk))})"


def of(value: T) -> Task[T]:
    return Task.of(value)


def from_io(fn: Callable[[], T]) -> Task[T]:
    return Task.from_io(fn)


def delay(seconds: float) -> Callable[[Task[T]], Task[T]]:
    """Pipeable ``task.delay(seconds)``."""
    def apply(task: Task[T]) -> Task[T]:
        return task.delay(seconds)
    return apply
