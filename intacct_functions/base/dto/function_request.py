"""DTO describing the plain input record for a function request.

Purpose
-------
Callers that assemble API calls from configuration or JSON hand over a plain
record ``{function_type, object_type?, object_key?, parameters}``. This DTO
validates the record's shape before it reaches :class:`Function`, which then
applies the vocabulary and object-key rules.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Failure modes
-------------
- ``pydantic.ValidationError`` when a field has the wrong shape (for example
  ``parameters`` not being a mapping).

Notes
-----
- camelCase keys (``functionType``, ``objectType``, ``objectKey``) are
  accepted as aliases next to the snake_case field names.
- String fields are string-like: scalars are coerced with ``str()`` and
  ``None`` becomes an empty string.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FunctionRequestDTO(BaseModel):
    """Validated input record for one function.

    Attributes
    ----------
    function_type:
        Function type name (e.g. ``"create"``). Checked against the allowed
        vocabulary by :class:`Function`, not here.
    object_type:
        Target object type (e.g. ``"customer"``). Defaults to ``""``.
    object_key:
        Key of an existing record. Defaults to ``""``.
    parameters:
        Ordered parameter mapping; nested mappings and lists of mappings are
        allowed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    function_type: str = Field(..., alias="functionType")
    object_type: str = Field(default="", alias="objectType")
    object_key: str = Field(default="", alias="objectKey")
    parameters: Dict[Any, Any]

    @field_validator("function_type", "object_type", "object_key", mode="before")
    @classmethod
    def _coerce_string_like(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list, tuple, set)):
            raise ValueError("expected a string-like value")
        return str(value)


__all__ = ["FunctionRequestDTO"]
