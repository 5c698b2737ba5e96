"""
Structured function error exception types.

Every validation failure raised while constructing a `Function` is a
`FunctionError` carrying a normalized `ErrorCode`, so callers can branch on
the code instead of parsing messages.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode


@dataclass(eq=False)
class FunctionError(Exception):
    """Represents a structured function construction error.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        function_type: The function type that was being constructed.
    """

    code: ErrorCode
    message: str
    function_type: str = ""

    def __str__(self) -> str:
        """Return a compact string combining function type, code, and message."""
        return f"{self.function_type or '-'} {self.code.value}: {self.message}"


class UnknownFunctionType(FunctionError):
    """Raised when the function type is not part of the allowed vocabulary."""

    def __init__(self, message: str, function_type: str = "") -> None:
        super().__init__(ErrorCode.UNKNOWN_FUNCTION_TYPE, message, function_type)


class InvalidArguments(FunctionError):
    """Raised when a field required by the function type is missing or malformed."""

    def __init__(self, message: str, function_type: str = "") -> None:
        super().__init__(ErrorCode.INVALID_ARGUMENTS, message, function_type)


__all__ = ["FunctionError", "UnknownFunctionType", "InvalidArguments"]
