"""Fan-out over many Tasks, optionally with a bounded concurrency window.

Layered on top of ``Task``/``TaskResult``; the core types themselves never
run anything concurrently. Results always come back in input order.

    >>> import asyncio
    >>> tasks = [Task.of(i).delay(0.01) for i in range(10)]
    >>> asyncio.run(sequence_par(tasks, concurrency=3)())
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]

The default window comes from ``ConcurrencySettings.default_limit``
(RAILCASE_CONCURRENCY_DEFAULT_LIMIT); unset means unbounded.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Callable, TypeVar

from railcase.core.result import Result, sequence
from railcase.foundation.config import get_settings
from railcase.observability import get_logger

from .task import Task
from .task_result import TaskResult

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

logger = get_logger("parallel")

__all__ = ["sequence_seq", "sequence_par", "traverse_par", "sequence_results"]


def _resolve_limit(concurrency: int | None) -> int | None:
    limit = concurrency if concurrency is not None else get_settings().concurrency.default_limit
    if limit is not None and limit < 1:
        raise ValueError("concurrency must be >= 1")
    return limit


def sequence_seq(tasks: Sequence[Task[T]]) -> Task[list[T]]:
    """Run tasks one after another; each starts when the previous resolves."""
    tasks = list(tasks)

    async def run() -> list[T]:
        return [await task() for task in tasks]
    return Task(run)


def sequence_par(tasks: Sequence[Task[T]], *, concurrency: int | None = None) -> Task[list[T]]:
    """Run tasks concurrently, at most ``concurrency`` in flight.

    Raises:
        ValueError: If concurrency is below 1 (at build time, not at run time)
    """
    tasks = list(tasks)
    limit = _resolve_limit(concurrency)

    async def run() -> list[T]:
        logger.debug("fan-out", extra={"tasks": len(tasks), "limit": limit})
        if limit is None:
            return list(await asyncio.gather(*(task() for task in tasks)))
        # Semaphore created per invocation so separate runs never share a window
        semaphore = asyncio.Semaphore(limit)

        async def bounded(task: Task[T]) -> T:
            async with semaphore:
                return await task()

        return list(await asyncio.gather(*(bounded(task) for task in tasks)))
    return Task(run)


def traverse_par(
    items: Sequence[T],
    f: Callable[[T], Task[U]],
    *,
    concurrency: int | None = None,
) -> Task[list[U]]:
    """Build a Task per item with f and run them as ``sequence_par`` does.

    f is called lazily, when the returned Task is invoked.
    """
    items = list(items)
    limit = _resolve_limit(concurrency)

    async def run() -> list[U]:
        return await sequence_par([f(item) for item in items], concurrency=limit)()
    return Task(run)


def sequence_results(
    task_results: Sequence[TaskResult[T, E]],
    *,
    concurrency: int | None = None,
) -> TaskResult[list[T], E]:
    """Run TaskResults concurrently and collect them into one.

    All of them run to resolution; the first Err in input order wins.
    """
    tasks = [tr.task for tr in task_results]
    gathered: Task[list[Result[T, E]]] = sequence_par(tasks, concurrency=concurrency)
    return TaskResult(gathered.map(sequence))
