"""Time-source abstraction used to stamp ``controlid`` values.

``Function`` never reads the wall clock directly; it asks a :class:`Clock`.
Production code uses :class:`SystemClock`, tests pass a :class:`FixedClock`
to assert exact output strings.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Interface for objects that report the current instant."""

    def now(self) -> datetime:  # pragma: no cover - protocol
        """Return the current instant as an aware UTC ``datetime``."""
        ...


class SystemClock:
    """Clock backed by the process wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock that always reports the same instant.

    Naive datetimes are interpreted as UTC.
    """

    def __init__(self, moment: datetime) -> None:
        self._moment = moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._moment


def format_timestamp(moment: datetime, fmt: str) -> str:
    """Convert ``moment`` to UTC and format it with ``fmt``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(fmt)


__all__ = ["Clock", "SystemClock", "FixedClock", "format_timestamp"]
