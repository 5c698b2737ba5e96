"""Configuration layer for intacct_functions.

Goals
-----
* Centralize defaults (controlid timestamp format, logger name, log level).
* Merge sources in a predictable order:
    1. Built-in defaults (:mod:`intacct_functions.config.defaults`)
    2. Environment variables (``INTACCT_FUNCTIONS_*``)
* Provide a single call site: ``get_settings()``.

Public API
----------
* get_settings() -> FunctionSettings
* FunctionSettings
"""
from __future__ import annotations

from .settings import FunctionSettings, get_settings

__all__ = [
    "FunctionSettings",
    "get_settings",
]
