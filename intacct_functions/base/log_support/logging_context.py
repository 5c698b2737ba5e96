"""Structured logging context object for function events.

:class:`LogContext` carries the identifying fields of a function (type,
object type, controlid) so every event about the same call can be
correlated. ``to_dict`` merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for function logging events."""

    function_type: Optional[str] = None
    object_type: Optional[str] = None
    controlid: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None and v != ""}


__all__ = ["LogContext"]
