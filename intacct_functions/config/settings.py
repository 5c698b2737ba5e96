"""Process-cached runtime settings for function rendering.

`FunctionSettings` captures the few knobs that can be tuned without code
changes. `get_settings()` parses environment overrides once and caches the
result, refreshing only when the relevant variables change so tests can use
``monkeypatch.setenv`` freely.

Supported environment variables (all optional):
    INTACCT_FUNCTIONS_CONTROLID_FORMAT
    INTACCT_FUNCTIONS_LOG_LEVEL
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from .defaults import (
    CONTROLID_FORMAT_ENV,
    CONTROLID_TIMESTAMP_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
)


@dataclass(frozen=True)
class FunctionSettings:
    """Container for normalized settings values.

    Attributes:
        controlid_timestamp_format: strftime pattern used for the timestamp
            part of every ``controlid``.
        log_level: Level name applied to the shared package logger.
    """

    controlid_timestamp_format: str = CONTROLID_TIMESTAMP_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


_CACHED: FunctionSettings | None = None
_ENV_GUARD: str | None = None


def _read_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_settings() -> FunctionSettings:
    """Return the process-cached `FunctionSettings` instance.

    The cache is rebuilt whenever one of the supported environment variables
    changes value.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = "/".join(
        [
            os.getenv(CONTROLID_FORMAT_ENV, ""),
            os.getenv(LOG_LEVEL_ENV, ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = FunctionSettings(
        controlid_timestamp_format=_read_env(CONTROLID_FORMAT_ENV, CONTROLID_TIMESTAMP_FORMAT),
        log_level=_read_env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["FunctionSettings", "get_settings"]
