"""Error data and exceptions.

- ErrorCode: classification of captured boundary failures
- BoundaryError: native exception converted to data
- UnwrapError: explicit unwrap called on the wrong variant
"""

from .errors import BoundaryError, ErrorCode, UnwrapError, classify_exception

__all__ = ["BoundaryError", "ErrorCode", "UnwrapError", "classify_exception"]
