"""Calendar event model as seen by the janitor."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from caljan.domain.types import GuestStatus


class Guest(BaseModel):
    """One entry on an event's guest list."""

    model_config = {"frozen": True}

    email: str
    status: GuestStatus = GuestStatus.INVITED


class CalendarEvent(BaseModel):
    """A calendar event from the viewer's point of view.

    Attributes:
        my_status: The viewer's own RSVP status.
        guests_can_see_guests: Whether the guest list is visible to guests.
            When False the guest count cannot be determined.
        creators: Addresses of the event's creators.
    """

    model_config = {"frozen": True}

    id: str
    title: str
    start: datetime
    end: datetime
    all_day: bool = False
    my_status: GuestStatus = GuestStatus.INVITED
    guests_can_see_guests: bool = True
    guests: list[Guest] = Field(default_factory=list)
    creators: list[str] = Field(default_factory=list)

    @property
    def guest_emails(self) -> list[str]:
        return [guest.email for guest in self.guests]
