"""Tests for Task: laziness, sequencing and independent invocations."""

from __future__ import annotations

import asyncio

import pytest

from railcase import Task, flow
from railcase.runtime.task import delay, from_io, of


@pytest.mark.asyncio
async def test_construction_does_no_work() -> None:
    calls: list[str] = []

    async def work() -> int:
        calls.append("run")
        return 1

    task = Task(work).map(lambda x: x + 1).chain(lambda x: Task.of(x * 2))
    assert calls == []
    assert await task() == 4
    assert calls == ["run"]


@pytest.mark.asyncio
async def test_functor_laws() -> None:
    f = lambda x: x + 1  # noqa: E731
    g = lambda x: x * 3  # noqa: E731
    task = Task.of(5)

    assert await task.map(lambda x: x)() == await task()
    assert await task.map(f).map(g)() == await task.map(flow(f, g))()


@pytest.mark.asyncio
async def test_invocations_are_independent() -> None:
    """A counter captured by the producer follows the producer's own semantics."""
    counter = {"n": 0}

    async def tick() -> int:
        counter["n"] += 1
        return counter["n"]

    task = Task(tick).map(lambda n: n * 10)
    first = task()
    second = task()
    assert first is not second
    assert await first == 10
    assert await second == 20


@pytest.mark.asyncio
async def test_repeated_invocation_reruns_from_scratch() -> None:
    """Re-invoking is indistinguishable from a first attempt (caller-side retry)."""
    attempts: list[int] = []

    async def attempt() -> int:
        attempts.append(len(attempts))
        return len(attempts)

    task = Task(attempt)
    results = [await task() for _ in range(3)]
    assert results == [1, 2, 3]
    assert attempts == [0, 1, 2]


@pytest.mark.asyncio
async def test_chain_is_sequential() -> None:
    events: list[str] = []

    async def first() -> int:
        events.append("first:start")
        await asyncio.sleep(0.01)
        events.append("first:end")
        return 1

    def second(value: int) -> Task[int]:
        async def run() -> int:
            events.append("second:start")
            return value + 1
        return Task(run)

    assert await Task(first).chain(second)() == 2
    assert events == ["first:start", "first:end", "second:start"]


@pytest.mark.asyncio
async def test_chain_first_keeps_original_value() -> None:
    seen: list[int] = []
    task = Task.of(7).chain_first(lambda v: Task.from_io(lambda: seen.append(v)))

    assert await task() == 7
    assert seen == [7]


@pytest.mark.asyncio
async def test_from_io_runs_per_invocation() -> None:
    calls: list[int] = []
    task = from_io(lambda: calls.append(1) or len(calls))

    assert await task() == 1
    assert await task() == 2


@pytest.mark.asyncio
async def test_delay() -> None:
    loop = asyncio.get_running_loop()
    started = loop.time()
    assert await delay(0.02)(of("late"))() == "late"
    assert loop.time() - started >= 0.015


def test_run_sync_without_loop() -> None:
    assert Task.of(3).map(lambda x: x + 1).run_sync() == 4


@pytest.mark.asyncio
async def test_run_sync_inside_running_loop() -> None:
    """From sync code under a running loop, run_sync uses a worker thread."""
    assert Task.of("ok").run_sync() == "ok"


def test_immutable() -> None:
    with pytest.raises(AttributeError):
        Task.of(1)._thunk = None  # type: ignore[misc,assignment]
    with pytest.raises(AttributeError):
        del Task.of(1)._thunk  # type: ignore[misc]
