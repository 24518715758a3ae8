"""RSVP statuses and decision outcomes."""

from __future__ import annotations

from enum import StrEnum


class GuestStatus(StrEnum):
    """RSVP status of a guest (including the viewer) on an event."""

    INVITED = "invited"
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"
    OWNER = "owner"


class Decision(StrEnum):
    """What the janitor does with one event."""

    SKIP = "skip"
    DECLINE_SILENTLY = "decline_silently"
    DECLINE_AND_NOTIFY = "decline_and_notify"


class DecisionReason(StrEnum):
    """Why the policy reached its decision."""

    NOT_INVITED = "not_invited"
    NO_CONFLICT = "no_conflict"
    LARGE_EVENT = "large_event"
    GUESTS_HIDDEN = "guests_hidden"
    CONFLICT = "conflict"
