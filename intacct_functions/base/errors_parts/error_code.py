"""
Normalized function error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every `FunctionError`. Values
are lowercase snake_case and are considered a stable public contract for
logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes for function construction failures."""

    UNKNOWN_FUNCTION_TYPE = "unknown_function_type"
    INVALID_ARGUMENTS = "invalid_arguments"


__all__ = ["ErrorCode"]
