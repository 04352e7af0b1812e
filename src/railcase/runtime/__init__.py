"""Deferred computation: Task, TaskResult, the native-exception bridge and fan-out.

Example:
    >>> from railcase.runtime import TaskResult, try_catch
    >>> async def fetch_user(uid: int) -> dict:
    ...     raise ConnectionError("network unreachable")
    >>> user = try_catch(lambda: fetch_user(1), lambda _: "network-error")
    >>> user.map(lambda u: u["name"]).run_sync()
    Err('network-error')
"""

from .interop import run_sync
from .parallel import sequence_par, sequence_results, sequence_seq, traverse_par
from .task import Task, delay, from_io, of
from .task_result import TaskResult, from_option, from_predicate, try_catch, try_catch_k

__all__ = [
    # Task
    "Task", "of", "from_io", "delay",
    # TaskResult
    "TaskResult", "from_option", "from_predicate",
    # Bridge
    "try_catch", "try_catch_k",
    # Fan-out
    "sequence_seq", "sequence_par", "traverse_par", "sequence_results",
    # Sync entry point
    "run_sync",
]
