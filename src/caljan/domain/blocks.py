"""DNS block set — explicit marker events plus one implicit block per day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, tzinfo

from caljan.domain.events import CalendarEvent
from caljan.domain.intervals import Interval, TimeInterval

DEFAULT_MARKER = "DNS"
DEFAULT_DAILY_START = time(0, 0)
DEFAULT_DAILY_END = time(8, 0)


def is_explicit_block(event: CalendarEvent, marker: str = DEFAULT_MARKER) -> bool:
    """Whether *event* declares a DNS block (case-sensitive title prefix)."""
    return not event.all_day and event.title.startswith(marker)


def implicit_block(
    day: date,
    *,
    daily_start: time = DEFAULT_DAILY_START,
    daily_end: time = DEFAULT_DAILY_END,
    tz: tzinfo | None = None,
) -> TimeInterval:
    """The implicit quiet period on *day*."""
    return TimeInterval(
        start=datetime.combine(day, daily_start, tzinfo=tz),
        end=datetime.combine(day, daily_end, tzinfo=tz),
    )


def build_dns_blocks(
    events: Iterable[CalendarEvent],
    *,
    window_start: datetime,
    days: int,
    marker: str = DEFAULT_MARKER,
    daily_start: time = DEFAULT_DAILY_START,
    daily_end: time = DEFAULT_DAILY_END,
) -> list[Interval]:
    """Build the blocking intervals for ``[window_start, window_start + days)``.

    Explicit blocks come first, in event order, followed by one implicit
    block for each of the *days* calendar days starting at the window's
    start date. Each implicit block is built from wall-clock times on its own
    day: with a naive *window_start* (local wall time) the blocks are naive
    too, so a DST change inside the window never shifts them. An aware
    *window_start* lends its ``tzinfo`` to every block.
    """
    blocks: list[Interval] = [e for e in events if is_explicit_block(e, marker)]
    first_day = window_start.date()
    for offset in range(days):
        blocks.append(
            implicit_block(
                first_day + timedelta(days=offset),
                daily_start=daily_start,
                daily_end=daily_end,
                tz=window_start.tzinfo,
            )
        )
    return blocks
