"""JsonCalendarStore — a local JSON file acting as calendar, directory, and mailer.

One document holds the viewer's address, the events, the mailing groups,
and an outbox of sent notices::

    {"user": "me@example.com",
     "events": [{"id": "e1", "title": "Sync", "start": "...", "end": "...",
                 "my_status": "invited", "guests": [{"email": "a@x"}]}],
     "groups": {"team@x": {"members": ["a@x"], "subgroups": []}},
     "outbox": []}

Changes stay in memory until :meth:`JsonCalendarStore.save`.
Timestamps are held as naive local wall time; values carrying an offset
are converted to it on load, so a 07:30 event stays 07:30 across DST.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from caljan.domain.events import CalendarEvent
from caljan.domain.guests import GroupResolution, NotAGroup, ResolvedGroup
from caljan.domain.intervals import TimeInterval, overlaps
from caljan.domain.types import GuestStatus

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The store file is missing, malformed, or inconsistent."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class GroupEntry(BaseModel):
    members: list[str] = Field(default_factory=list)
    subgroups: list[str] = Field(default_factory=list)


class OutboxMessage(BaseModel):
    recipients: list[str]
    subject: str
    body: str


class StoreDocument(BaseModel):
    """Schema of the store file."""

    user: str
    events: list[CalendarEvent] = Field(default_factory=list)
    groups: dict[str, GroupEntry] = Field(default_factory=dict)
    outbox: list[OutboxMessage] = Field(default_factory=list)


def as_local(moment: datetime) -> datetime:
    """Convert *moment* to naive local wall time (naive values pass through)."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


class JsonCalendarStore:
    """Implements CalendarSource, GroupDirectory, MailSender, and Identity."""

    def __init__(self, document: StoreDocument, path: Path | None = None) -> None:
        self.path = path
        self._doc = document
        self._events = [
            e.model_copy(update={"start": as_local(e.start), "end": as_local(e.end)})
            for e in document.events
        ]

    @classmethod
    def load(cls, path: Path) -> JsonCalendarStore:
        """Read and validate the store at *path*."""
        if not path.is_file():
            raise StoreError("STORE_NOT_FOUND", f"Calendar store not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StoreError("INVALID_STORE", f"Invalid calendar store {path}: {exc}") from exc
        except OSError as exc:
            raise StoreError(
                "STORE_UNREADABLE", f"Cannot read calendar store {path}: {exc}"
            ) from exc
        try:
            document = StoreDocument.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise StoreError("INVALID_STORE", f"Invalid calendar store {path}: {exc}") from exc
        logger.debug("Loaded %d events from %s", len(document.events), path)
        return cls(document, path)

    def save(self) -> None:
        if self.path is None:
            raise StoreError("NO_PATH", "Store was not loaded from a file")
        doc = self._doc.model_copy(update={"events": self._events})
        self.path.write_text(doc.model_dump_json(indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved calendar store to %s", self.path)

    # --- CalendarSource ---

    def get_events(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        window = TimeInterval(start=start, end=end)
        return [e for e in self._events if overlaps(e, window)]

    def set_my_status(self, event: CalendarEvent, status: GuestStatus) -> None:
        for i, existing in enumerate(self._events):
            if existing.id == event.id:
                self._events[i] = existing.model_copy(update={"my_status": status})
                return
        raise StoreError("EVENT_NOT_FOUND", f"No event with id {event.id!r}")

    # --- GroupDirectory ---

    def resolve_group(self, identifier: str) -> GroupResolution:
        entry = self._doc.groups.get(identifier)
        if entry is None:
            return NotAGroup(identifier=identifier)
        return ResolvedGroup(
            identifier=identifier,
            members=entry.members,
            subgroups=entry.subgroups,
        )

    # --- MailSender ---

    def send(self, recipients: Sequence[str], subject: str, body: str) -> None:
        self._doc.outbox.append(
            OutboxMessage(recipients=list(recipients), subject=subject, body=body)
        )

    @property
    def outbox(self) -> list[OutboxMessage]:
        return list(self._doc.outbox)

    # --- Identity ---

    def effective_user_email(self) -> str:
        return self._doc.user
