"""Pytest configuration for the intacct_functions test suite.

Provides a fixed clock so rendered XML can be asserted as exact strings, and
a capture stream attached to the shared package logger (which does not
propagate to the root logger, so ``caplog`` cannot see it).
"""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from typing import Iterator

import pytest

from intacct_functions.base.clock import FixedClock
from intacct_functions.base.logging import get_logger
from intacct_functions.config.defaults import BASE_LOGGER_NAME

FIXED_MOMENT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

@pytest.fixture()
def fixed_clock() -> FixedClock:
    """Clock pinned to ``FIXED_MOMENT``."""

    return FixedClock(FIXED_MOMENT)


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Capture raw messages emitted through the shared package logger."""

    get_logger()
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    previous_level = base_logger.level
    previous_handler_levels = [(h, h.level) for h in base_logger.handlers]
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base_logger.addHandler(handler)
    try:
        yield stream
    finally:
        base_logger.removeHandler(handler)
        base_logger.setLevel(previous_level)
        for existing, level in previous_handler_levels:
            existing.setLevel(level)
