"""Decision policy — decline vs. skip for one invitation.

The policy only decides. Applying a decision (RSVP write, notification)
belongs to the service layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel

from caljan.domain.guests import MinGuestsPredicate
from caljan.domain.intervals import Interval, overlaps_any
from caljan.domain.types import Decision, DecisionReason, GuestStatus

if TYPE_CHECKING:
    from caljan.domain.collaborators import GroupDirectory
    from caljan.domain.events import CalendarEvent

LARGE_EVENT_MIN_GUESTS = 24


class EventDecision(BaseModel):
    """Outcome of the policy for one event."""

    model_config = {"frozen": True}

    event_id: str
    title: str
    start: datetime
    end: datetime
    my_status: GuestStatus
    action: Decision
    reason: DecisionReason

    @property
    def declines(self) -> bool:
        return self.action is not Decision.SKIP


def decide(
    event: CalendarEvent,
    blocks: Sequence[Interval],
    *,
    directory: GroupDirectory,
    min_guests: int = LARGE_EVENT_MIN_GUESTS,
) -> EventDecision:
    """Decide what to do with *event* given the DNS *blocks*.

    Only pending invitations that overlap a block are declined. Events
    whose guest list is hidden are declined without consulting the guest
    count; the rest are spared when their expanded guest list reaches
    *min_guests* distinct guests.
    """
    if event.my_status is not GuestStatus.INVITED:
        action, reason = Decision.SKIP, DecisionReason.NOT_INVITED
    elif not overlaps_any(event, blocks):
        action, reason = Decision.SKIP, DecisionReason.NO_CONFLICT
    elif not event.guests_can_see_guests:
        action, reason = Decision.DECLINE_SILENTLY, DecisionReason.GUESTS_HIDDEN
    elif MinGuestsPredicate(event.guest_emails, min_guests, directory).test():
        action, reason = Decision.SKIP, DecisionReason.LARGE_EVENT
    else:
        action, reason = Decision.DECLINE_AND_NOTIFY, DecisionReason.CONFLICT

    return EventDecision(
        event_id=event.id,
        title=event.title,
        start=event.start,
        end=event.end,
        my_status=event.my_status,
        action=action,
        reason=reason,
    )
