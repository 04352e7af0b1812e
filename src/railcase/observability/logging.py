"""Logging setup for the ``railcase`` logger tree.

Library modules log through ``logging.getLogger("railcase.<area>")`` and never
touch the root logger. Applications opt in to output with
``configure_logging``:

    >>> from railcase.observability import configure_logging
    >>> configure_logging(format="console", level="DEBUG")  # or "json"

Defaults come from ``LoggingSettings`` (RAILCASE_LOG_LEVEL, RAILCASE_LOG_FORMAT).
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from railcase.foundation.config import get_settings

ROOT_LOGGER = "railcase"

# LogRecord attributes that are not user supplied ``extra`` fields
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}


class ConsoleFormatter(logging.Formatter):
    """Human-readable output. Format: HH:MM:SS.mmm [level] logger: event key=value ..."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
        parts = [ts, f"[{record.levelname.lower()}]", f"{record.name}:", record.getMessage()]
        parts += [f"{k}={v!r}" for k, v in sorted(_extra_fields(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **_extra_fields(record),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``railcase`` logger. Format: "console" (human), "json" (machine), "none".

    Replaces handlers installed by earlier calls, so it is safe to call more
    than once. Unset arguments fall back to ``LoggingSettings``.
    """
    settings = get_settings().logging
    format = format or settings.format  # noqa: A001
    level = (level or settings.level).upper()

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    match format:
        case "console":
            handler: logging.Handler = logging.StreamHandler(output or sys.stderr)
            handler.setFormatter(ConsoleFormatter())
        case "json":
            handler = logging.StreamHandler(output or sys.stdout)
            handler.setFormatter(JsonFormatter())
        case "none":
            handler = logging.NullHandler()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))
    logger.propagate = False
    return logger


def get_logger(area: str) -> logging.Logger:
    """Logger for a library area, e.g. ``get_logger("bridge")`` -> ``railcase.bridge``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")
