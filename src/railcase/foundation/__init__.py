"""Foundation layer: configuration and error data shared by every module."""

from .config import Settings, clear_settings_cache, get_settings
from .errors import BoundaryError, ErrorCode, UnwrapError, classify_exception

__all__ = [
    "Settings", "get_settings", "clear_settings_cache",
    "BoundaryError", "ErrorCode", "UnwrapError", "classify_exception",
]
