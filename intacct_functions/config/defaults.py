"""intacct_functions.config.defaults
=================================

Central place for small, stable default values used across the
intacct_functions package. These defaults can be overridden via environment
variables (see :mod:`intacct_functions.config.settings`), but provide sensible
fallbacks for local development and tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Control id ----

# strftime pattern for the UTC timestamp suffix of a function's controlid.
CONTROLID_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# ---- Logging ----

# Name of the shared package logger; child loggers propagate into it.
BASE_LOGGER_NAME = "intacct_functions"
DEFAULT_LOG_LEVEL = "INFO"

# ---- Environment variable names ----

CONTROLID_FORMAT_ENV = "INTACCT_FUNCTIONS_CONTROLID_FORMAT"
LOG_LEVEL_ENV = "INTACCT_FUNCTIONS_LOG_LEVEL"


__all__ = [
    "CONTROLID_TIMESTAMP_FORMAT",
    "BASE_LOGGER_NAME",
    "DEFAULT_LOG_LEVEL",
    "CONTROLID_FORMAT_ENV",
    "LOG_LEVEL_ENV",
]
