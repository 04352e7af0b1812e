"""Logging for railcase."""

from .logging import ConsoleFormatter, JsonFormatter, configure_logging, get_logger

__all__ = ["ConsoleFormatter", "JsonFormatter", "configure_logging", "get_logger"]
