"""intacct_functions package

Builds the ``<function>`` XML fragments that make up requests to the Intacct
accounting API.

Purpose:
    Validate a function description (type, object type, object key,
    parameters) and render it with the casing and nesting rules the API
    expects for that function type. Envelope construction, transport and
    response parsing are left to the caller.

Public API (re-exported):
    - Version: ``__version__``
    - Builder: :class:`Function`, :func:`build_function`
    - Exceptions: :class:`FunctionError`, :class:`UnknownFunctionType`,
      :class:`InvalidArguments`, :class:`ErrorCode`
    - Clock: :class:`FixedClock`, :class:`SystemClock`
"""

from typing import Any, Mapping, Optional

from .base import (
    ALLOWED_TYPES,
    Clock,
    ErrorCode,
    FixedClock,
    Function,
    FunctionError,
    FunctionRequestDTO,
    InvalidArguments,
    SystemClock,
    UnknownFunctionType,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Builder
    "Function",
    "FunctionRequestDTO",
    "ALLOWED_TYPES",
    "build_function",
    # Exceptions
    "ErrorCode",
    "FunctionError",
    "UnknownFunctionType",
    "InvalidArguments",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
]


def build_function(
    function_type: str,
    *,
    object_type: Optional[str] = None,
    object_key: Optional[str] = None,
    parameters: Mapping[str, Any],
    clock: Optional[Clock] = None,
) -> str:
    """Validate a function and return its XML fragment in one call.

    Parameters
    ----------
    function_type:
        Function type name (for example ``"readByQuery"``).
    object_type:
        Target object type (for example ``"customer"``).
    object_key:
        Key of an existing record, required by key-based types.
    parameters:
        Ordered parameter mapping.
    clock:
        Optional time source for ``controlid``.

    Returns
    -------
    str
        The ``<function>`` element as XML text.

    Raises
    ------
    UnknownFunctionType, InvalidArguments
        When the function cannot be constructed.
    """
    fn = Function(function_type, object_type=object_type, object_key=object_key, parameters=parameters, clock=clock)
    return fn.to_xml()
