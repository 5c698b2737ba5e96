"""Recursive parameter-to-XML serializer.

Renders :mod:`intacct_functions.base.parameters` values into lxml elements.
Text escaping is left to lxml; values never inject markup.
"""
from __future__ import annotations

from lxml import etree

from .function_types import TagCase
from .parameters import MappingValue, ParameterValue, ScalarValue, SequenceValue


def append_parameters(parent: etree._Element, mapping: MappingValue, tag_case: TagCase) -> None:
    """Append one child element per entry of ``mapping`` to ``parent``."""
    for name, value in mapping.items:
        child = etree.SubElement(parent, tag_case.apply(name))
        append_value(child, value, tag_case)


def append_value(element: etree._Element, value: ParameterValue, tag_case: TagCase) -> None:
    """Render ``value`` as the content of ``element``.

    Sequences are flattened: every item's entries become direct children of
    ``element``. Elements left without content keep an explicit empty text so
    they serialize as ``<TAG></TAG>``.
    """
    if isinstance(value, ScalarValue):
        element.text = value.text
    elif isinstance(value, MappingValue):
        append_parameters(element, value, tag_case)
    elif isinstance(value, SequenceValue):
        for item in value.items:
            append_parameters(element, item, tag_case)
    if len(element) == 0 and element.text is None:
        element.text = ""


def to_string(element: etree._Element) -> str:
    """Serialize ``element`` without an XML declaration or pretty-printing."""
    return etree.tostring(element, encoding="unicode")


__all__ = ["append_parameters", "append_value", "to_string"]
