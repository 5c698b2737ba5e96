"""
Function Base Package

Exports the function request builder and its supporting pieces:
- Function: validated request rendered to a ``<function>`` XML fragment
- Policies: allowed vocabulary and per-type shaping rules
- Parameters: tagged union for parameter values
- Clock: time source used for ``controlid``
- Errors: structured construction errors
"""

from .clock import Clock, FixedClock, SystemClock, format_timestamp
from .dto import FunctionRequestDTO
from .errors import ErrorCode, FunctionError, InvalidArguments, UnknownFunctionType
from .function import Function
from .function_types import ALLOWED_TYPES, POLICIES, FunctionPolicy, TagCase, policy_for
from .parameters import MappingValue, ParameterValue, ScalarValue, SequenceValue, to_parameter_value

__all__ = [
    # Builder
    "Function",
    "FunctionRequestDTO",
    # Policies
    "ALLOWED_TYPES",
    "POLICIES",
    "FunctionPolicy",
    "TagCase",
    "policy_for",
    # Parameters
    "ParameterValue",
    "ScalarValue",
    "MappingValue",
    "SequenceValue",
    "to_parameter_value",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "format_timestamp",
    # Errors
    "ErrorCode",
    "FunctionError",
    "UnknownFunctionType",
    "InvalidArguments",
]
