"""Collaborator protocols consumed by the janitor.

The domain never talks to a calendar, directory, or mail server directly;
it goes through these structural types. Implementations live in the
infrastructure layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from caljan.domain.events import CalendarEvent
    from caljan.domain.guests import GroupResolution
    from caljan.domain.types import GuestStatus


class CalendarSource(Protocol):
    def get_events(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        """Events intersecting ``[start, end)``."""
        ...

    def set_my_status(self, event: CalendarEvent, status: GuestStatus) -> None:
        """Persist the viewer's RSVP *status* on *event*."""
        ...


class GroupDirectory(Protocol):
    def resolve_group(self, identifier: str) -> GroupResolution:
        """Resolve *identifier* as a mailing group.

        Returns ``NotAGroup`` when the identifier is not a group. Any other
        failure (outage, permissions) is raised.
        """
        ...


class MailSender(Protocol):
    def send(self, recipients: Sequence[str], subject: str, body: str) -> None: ...


class Identity(Protocol):
    def effective_user_email(self) -> str: ...
