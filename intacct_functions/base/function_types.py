"""Function-type vocabulary and per-type XML shaping policies.

Every allowed function type maps to a :class:`FunctionPolicy` describing how
its parameters are rendered:

- ``tag_case``: how parameter tag names are cased (upper, lower, verbatim).
- ``wraps_with_object_type``: whether parameters are nested inside an
  element named after the object type (``<create><customer>...``).
- ``requires_object_key``: whether construction needs a non-empty key.

The vocabulary and these rules are the wire contract with the Intacct API;
they must not drift.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class TagCase(str, Enum):
    """Casing applied to parameter tag names."""

    UPPER = "upper"
    LOWER = "lower"
    VERBATIM = "verbatim"

    def apply(self, name: str) -> str:
        """Return ``name`` cased according to this mode."""
        if self is TagCase.UPPER:
            return name.upper()
        if self is TagCase.LOWER:
            return name.lower()
        return name


@dataclass(frozen=True)
class FunctionPolicy:
    """Shaping rules for one function type."""

    tag_case: TagCase = TagCase.UPPER
    wraps_with_object_type: bool = False
    requires_object_key: bool = False


ALLOWED_TYPES: Tuple[str, ...] = (
    "readByQuery",
    "read",
    "readByName",
    "readMore",
    "create",
    "update",
    "delete",
    "create_sotransaction",
    "update_sotransaction",
)

DEFAULT_POLICY = FunctionPolicy()

_CREATE_UPDATE = FunctionPolicy(tag_case=TagCase.UPPER, wraps_with_object_type=True)
_LOWER = FunctionPolicy(tag_case=TagCase.LOWER)

POLICIES: Dict[str, FunctionPolicy] = {
    "create": _CREATE_UPDATE,
    "update": _CREATE_UPDATE,
    "delete": _LOWER,
    "readByQuery": _LOWER,
    "read": _LOWER,
    "readByName": _LOWER,
    "create_sotransaction": _LOWER,
    "update_sotransaction": FunctionPolicy(tag_case=TagCase.LOWER, requires_object_key=True),
    "readMore": FunctionPolicy(tag_case=TagCase.VERBATIM),
}


def is_allowed(function_type: str) -> bool:
    return function_type in ALLOWED_TYPES


def policy_for(function_type: str) -> FunctionPolicy:
    """Return the shaping policy for an allowed function type.

    Allowed types without a dedicated entry use :data:`DEFAULT_POLICY`
    (upper-cased tags, no wrapping, no key).
    """
    return POLICIES.get(function_type, DEFAULT_POLICY)


__all__ = [
    "TagCase",
    "FunctionPolicy",
    "ALLOWED_TYPES",
    "DEFAULT_POLICY",
    "POLICIES",
    "is_allowed",
    "policy_for",
]
