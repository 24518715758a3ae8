"""Decline notification composition."""

from __future__ import annotations

from pydantic import BaseModel

from caljan.domain.events import CalendarEvent

DEFAULT_SUBJECT_TEMPLATE = "Auto-declined: {title} @ {start}"
DEFAULT_TIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"
DEFAULT_BODY = (
    "This event was automatically declined due to a conflict. Please let me "
    "know if you're expecting me to attend and rescheduling is not an option. "
    "Thanks!"
)
DEFAULT_ATTRIBUTION = "Sent using https://github.com/avamsi/calendar-janitor."


class DeclineNotice(BaseModel):
    """An email telling the organisers an invitation was auto-declined."""

    model_config = {"frozen": True}

    recipients: list[str]
    subject: str
    body: str


def compose_decline_notice(
    event: CalendarEvent,
    user_email: str,
    *,
    subject_template: str = DEFAULT_SUBJECT_TEMPLATE,
    time_format: str = DEFAULT_TIME_FORMAT,
    body: str = DEFAULT_BODY,
    attribution: str = DEFAULT_ATTRIBUTION,
) -> DeclineNotice:
    """Compose the notice for *event*: creators first, then the user.

    *subject_template* may reference ``{title}`` and ``{start}``.
    """
    subject = subject_template.format(
        title=event.title,
        start=event.start.strftime(time_format),
    )
    text = f"{body}\n\n{attribution}" if attribution else body
    return DeclineNotice(
        recipients=[*event.creators, user_email],
        subject=subject,
        body=text,
    )
