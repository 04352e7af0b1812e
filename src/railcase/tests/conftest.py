"""Pytest configuration: settings and logger isolation for every test."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from railcase.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings from the (possibly monkeypatched) environment per test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def restore_railcase_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog keeps seeing railcase records."""
    logger = logging.getLogger("railcase")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
