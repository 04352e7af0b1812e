"""Run a Task to completion from synchronous code.

Handles both situations a sync caller can be in:
    1. No running loop -> ``asyncio.run``
    2. Inside a running loop (Jupyter, a sync callback in an async app) ->
       a short-lived worker thread with its own loop, since the running loop
       cannot be re-entered.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")


async def _await(thunk: Callable[[], Awaitable[T]]) -> T:
    return await thunk()


def run_sync(thunk: Callable[[], Awaitable[T]]) -> T:
    """Invoke thunk and block until its awaitable resolves.

    Example:
        >>> from railcase import Task
        >>> run_sync(Task.of(42))
        42
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(_await(thunk))
    return _run_in_thread_loop(thunk)


def _run_in_thread_loop(thunk: Callable[[], Awaitable[T]]) -> T:
    """Run in a new thread with its own event loop."""
    result: T | None = None
    error: BaseException | None = None

    def runner() -> None:
        nonlocal result, error
        try:
            result = asyncio.run(_await(thunk))
        except BaseException as e:
            error = e

    thread = threading.Thread(target=runner, daemon=True, name="railcase-run-sync")
    thread.start()
    thread.join()

    if error is not None:
        raise error
    return result  # type: ignore[return-value]
