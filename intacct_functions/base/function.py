"""Function request builder.

A :class:`Function` is one remote procedure call to the Intacct API: a
function type (``create``, ``readByQuery``, ...), an optional object type and
key, and an ordered parameter tree. It is validated once at construction and
rendered to a ``<function>`` XML fragment on demand::

    >>> fn = Function("create", object_type="customer", parameters={"name": "Acme"})
    >>> fn.to_xml()  # doctest: +SKIP
    '<function controlid="create-customer-..."><create><customer><NAME>Acme</NAME></customer></create></function>'

Envelope construction, transport and response parsing belong to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from lxml import etree

from ..config import get_settings
from .clock import Clock, SystemClock, format_timestamp
from .dto import FunctionRequestDTO
from .errors import FunctionError, InvalidArguments, UnknownFunctionType
from .function_types import ALLOWED_TYPES, FunctionPolicy, is_allowed, policy_for
from .logging import LogContext, get_logger, log_event
from .parameters import MappingValue, has_invalid_xml_chars, is_valid_tag_name, to_mapping_value
from .serializer import append_value, to_string

logger = get_logger(__name__)


def _string_like(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True, init=False)
class Function:
    """A validated, immutable function request.

    Attributes:
        function_type: Member of :data:`ALLOWED_TYPES`.
        object_type: Target object type; becomes the wrapping element for
            ``create``/``update``.
        object_key: Key of an existing record; rendered as the ``key``
            attribute of the function-type element when non-empty.
        parameters: Parameter tree converted to :class:`MappingValue`.
        clock: Time source used for ``controlid``.

    Raises (at construction):
        UnknownFunctionType: ``function_type`` is not allowed.
        InvalidArguments: a field required by the function type is missing,
            or the parameters cannot be represented as XML.
    """

    function_type: str
    object_type: str
    object_key: str
    parameters: MappingValue
    clock: Clock = field(repr=False, compare=False)

    def __init__(
        self,
        function_type: Any,
        object_type: Any = None,
        object_key: Any = None,
        parameters: Optional[Mapping[str, Any]] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        object.__setattr__(self, "function_type", _string_like(function_type))
        object.__setattr__(self, "object_type", _string_like(object_type))
        object.__setattr__(self, "object_key", _string_like(object_key))
        object.__setattr__(self, "clock", clock if clock is not None else SystemClock())
        try:
            self._validate_type()
            self._validate_args(parameters)
            object.__setattr__(self, "parameters", to_mapping_value(parameters))
        except FunctionError as exc:
            if not exc.function_type:
                exc.function_type = self.function_type
            log_event(
                logger,
                "function.rejected",
                self._log_context(),
                level=logging.WARNING,
                error_code=exc.code.value,
                reason=exc.message,
            )
            raise

    @classmethod
    def from_record(cls, record: Mapping[str, Any], *, clock: Optional[Clock] = None) -> "Function":
        """Build a function from a plain input record.

        The record is validated with :class:`FunctionRequestDTO` first;
        ``pydantic.ValidationError`` propagates for malformed records.
        """
        dto = record if isinstance(record, FunctionRequestDTO) else FunctionRequestDTO.model_validate(record)
        return cls(
            dto.function_type,
            object_type=dto.object_type,
            object_key=dto.object_key,
            parameters=dto.parameters,
            clock=clock,
        )

    @property
    def policy(self) -> FunctionPolicy:
        return policy_for(self.function_type)

    def controlid(self) -> str:
        """Return a fresh correlation id ``{function_type}-{object_type}-{timestamp}``.

        The timestamp is read from the clock on every call.
        """
        stamp = format_timestamp(self.clock.now(), get_settings().controlid_timestamp_format)
        return f"{self.function_type}-{self.object_type}-{stamp}"

    def to_element(self, controlid: Optional[str] = None) -> etree._Element:
        """Render the function as an lxml ``<function>`` element.

        Parameters:
            controlid: Correlation id to stamp on the root; a fresh one is
                computed when omitted.
        """
        policy = self.policy
        root = etree.Element("function", controlid=controlid or self.controlid())
        attrs = {"key": self.object_key} if self.object_key.strip() else {}
        target = etree.SubElement(root, self.function_type, attrs)
        if policy.wraps_with_object_type:
            target = etree.SubElement(target, self.object_type)
        append_value(target, self.parameters, policy.tag_case)
        return root

    def to_xml(self) -> str:
        """Render the function as an XML string without declaration."""
        controlid = self.controlid()
        xml = to_string(self.to_element(controlid))
        log_event(logger, "function.serialized", self._log_context(controlid), level=logging.DEBUG)
        return xml

    def _log_context(self, controlid: Optional[str] = None) -> LogContext:
        return LogContext(function_type=self.function_type, object_type=self.object_type, controlid=controlid)

    def _validate_type(self) -> None:
        if not is_allowed(self.function_type):
            raise UnknownFunctionType(
                f"Type {self.function_type!r} not recognized. Function type must be one of "
                f"{', '.join(ALLOWED_TYPES)}.",
                self.function_type,
            )

    def _validate_args(self, parameters: Optional[Mapping[str, Any]]) -> None:
        policy = self.policy
        if policy.requires_object_key and not self.object_key.strip():
            raise InvalidArguments(
                f"{self.function_type} cannot be executed without an object key.",
                self.function_type,
            )
        for label, text in (("object key", self.object_key), ("object type", self.object_type)):
            if has_invalid_xml_chars(text):
                raise InvalidArguments(
                    f"{self.function_type} {label} {text!r} contains characters not allowed in XML.",
                    self.function_type,
                )
        if policy.wraps_with_object_type and not is_valid_tag_name(self.object_type):
            raise InvalidArguments(
                f"{self.function_type} requires an object type usable as an XML element name; "
                f"got {self.object_type!r}.",
                self.function_type,
            )
        if not isinstance(parameters, Mapping):
            raise InvalidArguments(
                f"{self.function_type} requires a parameters mapping; got {type(parameters).__name__}.",
                self.function_type,
            )


__all__ = ["Function"]
