"""Boundary failure data and library misuse exceptions.

Native exceptions captured at the async bridge become ``BoundaryError``
values. ``UnwrapError`` is the one exception the containers raise themselves,
and only from the explicit ``unwrap`` family.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import Self

from pydantic import BaseModel, ConfigDict


class ErrorCode(StrEnum):
    """Coarse classification of a captured boundary failure."""
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_PARAMS = "INVALID_PARAMS"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    EXTERNAL_ERROR = "EXTERNAL_ERROR"
    UNKNOWN = "UNKNOWN"


# Checked in insertion order, first hit wins
_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "timedout": ErrorCode.TIMEOUT,
    "connection": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "unreachable": ErrorCode.NETWORK_ERROR,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "notfound": ErrorCode.NOT_FOUND,
    "not found": ErrorCode.NOT_FOUND,
    "keyerror": ErrorCode.NOT_FOUND,
    "parse": ErrorCode.PARSE_ERROR,
    "json": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "validation": ErrorCode.INVALID_PARAMS,
    "valueerror": ErrorCode.INVALID_PARAMS,
    "typeerror": ErrorCode.INVALID_PARAMS,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES)


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.EXTERNAL_ERROR


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code via pattern matching on name/message."""
    return _classify_cached(f"{type(exc).__name__} {exc}")


class BoundaryError(BaseModel):
    """A native exception converted to data at the async bridge.

    Default failure payload of ``try_catch`` when no ``on_rejected`` mapper is
    given. Frozen, so it can sit inside ``Err`` and be hashed or compared.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    exception_type: str = "Exception"
    details: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_trace: bool = False) -> Self:
        """Create from exception with auto-classification."""
        details = None
        if include_trace:
            details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(
            message=str(exc) or type(exc).__name__,
            code=classify_exception(exc),
            exception_type=type(exc).__name__,
            details=details,
        )

    def render(self) -> str:
        """One-line human readable form."""
        return f"[{self.code}] {self.exception_type}: {self.message}"

    __str__ = render


class UnwrapError(RuntimeError):
    """Raised by ``unwrap``/``unwrap_err`` called on the wrong variant.

    Carries the container that could not be unwrapped so the failure payload
    is never lost.
    """

    def __init__(self, message: str, container: object) -> None:
        super().__init__(message)
        self.container = container
