"""Parameter value model for function requests.

A parameter value is one of three variants:

- :class:`ScalarValue`: leaf text.
- :class:`MappingValue`: ordered ``(name, value)`` pairs, rendered as nested
  elements.
- :class:`SequenceValue`: ordered mappings, rendered as repeated sibling
  groups with no wrapping element.

:func:`to_parameter_value` converts plain Python data (dicts, lists, scalars)
into this model once, at construction time, so the serializer handles each
variant with a single clause. Names and text are checked against what XML
can carry here, which keeps rendering itself free of failure modes.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from lxml import etree

from .errors import InvalidArguments

# Characters XML 1.0 cannot carry, even escaped.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(frozen=True)
class ScalarValue:
    text: str


@dataclass(frozen=True)
class MappingValue:
    items: Tuple[Tuple[str, "ParameterValue"], ...] = ()


@dataclass(frozen=True)
class SequenceValue:
    items: Tuple[MappingValue, ...] = ()


ParameterValue = Union[ScalarValue, MappingValue, SequenceValue]


def is_valid_tag_name(name: str) -> bool:
    """Return whether lxml accepts ``name`` as an unprefixed element name.

    The upper- and lower-cased forms are checked too, since any of them may
    end up on the wire depending on the function type.
    """
    if not name or name.startswith("{"):
        return False
    for candidate in {name, name.upper(), name.lower()}:
        try:
            etree.QName(candidate)
        except ValueError:
            return False
    return True


def has_invalid_xml_chars(text: str) -> bool:
    return bool(_INVALID_XML_CHARS.search(text))


def scalar_text(value: Any) -> str:
    """Return the wire text for a scalar value.

    ``None`` renders as an empty string and booleans as ``true``/``false``;
    everything else goes through ``str()``.

    Raises:
        InvalidArguments: When the text holds characters XML cannot represent.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if has_invalid_xml_chars(text):
        raise InvalidArguments(f"parameter value {text!r} contains characters not allowed in XML")
    return text


def to_mapping_value(data: Mapping[Any, Any]) -> MappingValue:
    """Convert a mapping into a :class:`MappingValue`, keeping insertion order.

    Raises:
        InvalidArguments: When a key is not usable as an XML element name.
    """
    items = []
    for key, value in data.items():
        name = str(key)
        if not is_valid_tag_name(name):
            raise InvalidArguments(f"parameter name {name!r} is not a valid XML element name")
        items.append((name, to_parameter_value(value)))
    return MappingValue(tuple(items))


def to_parameter_value(value: Any) -> ParameterValue:
    """Convert plain Python data into a :class:`ParameterValue`.

    Values that are already parameter values pass through unchanged.

    Raises:
        InvalidArguments: When a list or tuple contains an item that is not
            a mapping, or when a name or text cannot be represented in XML.
    """
    if isinstance(value, (ScalarValue, MappingValue, SequenceValue)):
        return value
    if isinstance(value, Mapping):
        return to_mapping_value(value)
    if isinstance(value, (list, tuple)):
        items = []
        for index, item in enumerate(value):
            if isinstance(item, MappingValue):
                items.append(item)
            elif isinstance(item, Mapping):
                items.append(to_mapping_value(item))
            else:
                raise InvalidArguments(
                    f"sequence parameter items must be mappings; item {index} is {type(item).__name__}"
                )
        return SequenceValue(tuple(items))
    return ScalarValue(scalar_text(value))


__all__ = [
    "ScalarValue",
    "MappingValue",
    "SequenceValue",
    "ParameterValue",
    "has_invalid_xml_chars",
    "is_valid_tag_name",
    "scalar_text",
    "to_mapping_value",
    "to_parameter_value",
]
