"""Function error taxonomy public surface.

This module re-exports the implementations under
``intacct_functions.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.function_error import FunctionError, InvalidArguments, UnknownFunctionType

__all__ = ["ErrorCode", "FunctionError", "UnknownFunctionType", "InvalidArguments"]
