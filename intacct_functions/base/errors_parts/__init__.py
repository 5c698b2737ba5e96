"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `intacct_functions.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .function_error import FunctionError, InvalidArguments, UnknownFunctionType

__all__ = ["ErrorCode", "FunctionError", "UnknownFunctionType", "InvalidArguments"]
