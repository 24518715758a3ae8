"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import datetime


def local_now() -> datetime:
    """Current local wall time (naive, like the store's timestamps)."""
    return datetime.now()


def iso(moment: datetime) -> str:
    """ISO 8601 without microseconds (for result payloads)."""
    return moment.replace(microsecond=0).isoformat()
