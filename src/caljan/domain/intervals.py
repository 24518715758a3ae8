"""Time intervals and the overlap predicate.

Anything exposing ``start`` and ``end`` instants is an interval: calendar
events and synthetic DNS blocks are compared the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from pydantic import BaseModel


class Interval(Protocol):
    """Structural type for a time-bounded entity."""

    @property
    def start(self) -> datetime: ...

    @property
    def end(self) -> datetime: ...


class TimeInterval(BaseModel):
    """Immutable ``[start, end)`` interval. ``start <= end`` is not checked."""

    model_config = {"frozen": True}

    start: datetime
    end: datetime


def overlaps(a: Interval, b: Interval) -> bool:
    """Whether *a* and *b* share any instant.

    Strict on both ends: touching endpoints do not overlap, so a
    zero-duration interval only overlaps intervals that strictly contain it.

    Examples:
        >>> from datetime import datetime
        >>> nine = TimeInterval(start=datetime(2026, 1, 1, 9), end=datetime(2026, 1, 1, 10))
        >>> ten = TimeInterval(start=datetime(2026, 1, 1, 10), end=datetime(2026, 1, 1, 11))
        >>> overlaps(nine, ten)
        False
    """
    return a.start < b.end and b.start < a.end


def overlaps_any(interval: Interval, others: Iterable[Interval]) -> bool:
    """Whether *interval* overlaps at least one of *others* (short-circuits)."""
    return any(overlaps(interval, other) for other in others)
