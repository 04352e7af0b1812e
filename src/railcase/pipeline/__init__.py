"""Pipeline composition: pipe/flow plus pipeable container combinators.

Example:
    >>> from railcase.pipeline import pipe, flow, map, chain, match
    >>> from railcase import Ok, Err
    >>> validate = flow(
    ...     chain(lambda n: Ok(n) if n > 0 else Err("not positive")),
    ...     map(lambda n: n * 2),
    ...     match(lambda e: f"error: {e}", str),
    ... )
    >>> validate(Ok(4)), validate(Ok(-1))
    ('8', 'error: not positive')
"""

from .combinators import (
    bimap,
    chain,
    chain_w,
    flat_map,
    get_or_else,
    map,
    map_error,
    map_left,
    match,
    match_w,
)
from .pipe import constant, flow, identity, pipe

__all__ = [
    # Composition
    "pipe", "flow", "identity", "constant",
    # Pipeable combinators
    "map", "chain", "flat_map", "chain_w", "map_error", "map_left", "bimap",
    "match", "match_w", "get_or_else",
]
