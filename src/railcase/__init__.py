"""Railcase - typed failure as data, and lazy async computations that cannot fail.

Result, Option, Task and TaskResult, composed with pipe/flow and a single set
of map/chain/match combinators that work across all of them.

Quick Start:
    >>> from railcase import Ok, Err, pipe, map, chain, match
    >>>
    >>> def parse(s: str):
    ...     return Ok(int(s)) if s.isdigit() else Err("not a number")
    >>>
    >>> pipe(
    ...     "21",
    ...     parse,
    ...     map(lambda n: n * 2),
    ...     match(lambda e: f"error: {e}", lambda n: f"got {n}"),
    ... )
    'got 42'

Async, with the one bridge that captures native exceptions:
    >>> from railcase import try_catch
    >>>
    >>> async def fetch() -> str:
    ...     raise OSError("network unreachable")
    >>>
    >>> try_catch(fetch, lambda _: "network-error").run_sync()
    Err('network-error')

Error types widen through ``chain_w``: the final ``match`` sees every
distinct failure cause that can reach it.
"""

from .core import (
    NONE,
    Err,
    Ok,
    Option,
    Result,
    Some,
    collect_results,
    from_nullable,
    from_option,
    get_left,
    get_right,
    is_err,
    is_none,
    is_ok,
    is_some,
    sequence,
    to_option,
    traverse,
)
from .foundation import BoundaryError, ErrorCode, UnwrapError, classify_exception, get_settings
from .observability import configure_logging
from .pipeline import (
    bimap,
    chain,
    chain_w,
    constant,
    flat_map,
    flow,
    get_or_else,
    identity,
    map,
    map_error,
    map_left,
    match,
    match_w,
    pipe,
)
from .runtime import (
    Task,
    TaskResult,
    run_sync,
    sequence_par,
    sequence_results,
    sequence_seq,
    traverse_par,
    try_catch,
    try_catch_k,
)

__version__ = "0.1.0"

__all__ = [
    # Sum types
    "Result", "Ok", "Err", "is_ok", "is_err",
    "Option", "Some", "NONE", "from_nullable", "is_some", "is_none",
    # Conversions
    "get_right", "get_left", "to_option", "from_option",
    # List operations
    "sequence", "traverse", "collect_results",
    # Composition
    "pipe", "flow", "identity", "constant",
    # Pipeable combinators
    "map", "chain", "flat_map", "chain_w", "map_error", "map_left", "bimap",
    "match", "match_w", "get_or_else",
    # Deferred computation
    "Task", "TaskResult", "try_catch", "try_catch_k", "run_sync",
    "sequence_seq", "sequence_par", "traverse_par", "sequence_results",
    # Errors & config
    "BoundaryError", "ErrorCode", "UnwrapError", "classify_exception",
    "get_settings", "configure_logging",
]
