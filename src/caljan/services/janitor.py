"""JanitorService — decline pending invitations that land in DNS blocks.

One run:

1. Load the non-all-day events in ``[now, now + look_ahead_days)``.
2. Build the DNS block set (marker events + one implicit block per day).
3. Ask the decision policy about every event, in calendar order.
4. Apply each decline: RSVP ``no``, then (optionally) email the organisers.

Decline and notify are not transactional. If a collaborator fails the run
stops right there: declines already applied stay applied, the remaining
events are not looked at, and the result reports ``RUN_ABORTED``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from caljan.domain.blocks import build_dns_blocks
from caljan.domain.events import CalendarEvent
from caljan.domain.notifications import compose_decline_notice
from caljan.domain.policy import EventDecision, decide
from caljan.domain.types import Decision, DecisionReason, GuestStatus
from caljan.infrastructure.store import StoreError
from caljan.services._helpers import iso, local_now
from caljan.services.base import BaseService
from caljan.services.result import ServiceResult
from caljan.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from caljan.domain.intervals import Interval

logger = logging.getLogger(__name__)


class JanitorService(BaseService):
    """Runs the janitor and inspects its DNS block set."""

    @traced
    def clean(self, *, now: datetime | None = None, dry_run: bool = False) -> ServiceResult:
        """Evaluate every event in the look-ahead window and apply declines.

        With *dry_run* the decisions are computed (including guest
        expansion) but nothing is written and no mail is sent.
        """
        start, end = self._window(now)
        try:
            events = self._load_events(start, end)
        except StoreError as exc:
            return ServiceResult.failure("clean", exc.code, exc.message)
        blocks = self._build_blocks(events, start)

        warnings: list[str] = []
        rows: list[dict[str, Any]] = []
        current: CalendarEvent | None = None
        try:
            with trace_span("evaluate") as span:
                for current in events:
                    rows.append(self._process(current, blocks, dry_run=dry_run, warnings=warnings))
                if span is not None:
                    span.annotate("events", len(events))
        except Exception as exc:
            logger.error("Run aborted at %s: %s", current.title if current else "?", exc)
            if not dry_run:
                self._workspace.commit()
            return ServiceResult.failure(
                "clean",
                "RUN_ABORTED",
                f"Run aborted while processing {current.title if current else 'events'}: {exc}",
                event_id=current.id if current else None,
                processed=rows,
            )

        if not dry_run:
            self._workspace.commit()

        declined = sum(1 for r in rows if r["action"] != Decision.SKIP)
        skipped = len(rows) - declined
        if not dry_run:
            self._dispatch_event("post_clean", {"declined": declined, "skipped": skipped}, warnings)

        return ServiceResult(
            ok=True,
            op="clean",
            data={
                "window_start": iso(start),
                "window_end": iso(end),
                "dry_run": dry_run,
                "count": len(rows),
                "declined": declined,
                "skipped": skipped,
                "notified": sum(1 for r in rows if r["notified"]),
                "blocks": len(blocks),
                "items": rows,
            },
            warnings=warnings,
        )

    @traced
    def blocks(self, *, now: datetime | None = None) -> ServiceResult:
        """List the DNS blocks for the look-ahead window."""
        start, end = self._window(now)
        try:
            events = self._load_events(start, end)
        except StoreError as exc:
            return ServiceResult.failure("blocks", exc.code, exc.message)

        items = []
        for block in self._build_blocks(events, start):
            explicit = isinstance(block, CalendarEvent)
            items.append(
                {
                    "kind": "explicit" if explicit else "implicit",
                    "title": block.title if explicit else "",
                    "start": iso(block.start),
                    "end": iso(block.end),
                }
            )
        return ServiceResult(
            ok=True,
            op="blocks",
            data={
                "window_start": iso(start),
                "window_end": iso(end),
                "count": len(items),
                "items": items,
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _window(self, now: datetime | None) -> tuple[datetime, datetime]:
        start = now or local_now()
        return start, start + timedelta(days=self._workspace.settings.window.look_ahead_days)

    def _load_events(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        with trace_span("load_events"):
            events = self._workspace.calendar.get_events(start, end)
        return [e for e in events if not e.all_day]

    def _build_blocks(self, events: list[CalendarEvent], start: datetime) -> list[Interval]:
        cfg = self._workspace.settings.blocks
        with trace_span("build_blocks"):
            return build_dns_blocks(
                events,
                window_start=start,
                days=self._workspace.settings.window.look_ahead_days,
                marker=cfg.marker,
                daily_start=cfg.start_time,
                daily_end=cfg.end_time,
            )

    def _process(
        self,
        event: CalendarEvent,
        blocks: list[Interval],
        *,
        dry_run: bool,
        warnings: list[str],
    ) -> dict[str, Any]:
        decision = decide(
            event,
            blocks,
            directory=self._workspace.directory,
            min_guests=self._workspace.settings.guests.large_event_min_guests,
        )
        notified = False
        if decision.reason is DecisionReason.NOT_INVITED:
            logger.info("Skipping %s (%s)", event.title, event.my_status)
        elif decision.reason is DecisionReason.LARGE_EVENT:
            logger.info("Keeping %s (large event)", event.title)
        elif decision.declines:
            logger.info("Declining %s (DNS)", event.title)
            if not dry_run:
                notified = self._apply(event, decision)
                self._dispatch_event(
                    "post_decline",
                    {"event_id": event.id, "title": event.title, "notified": notified},
                    warnings,
                )
        return _row(decision, notified=notified)

    def _apply(self, event: CalendarEvent, decision: EventDecision) -> bool:
        """Decline *event*; send the notice if the decision asks for one."""
        self._workspace.calendar.set_my_status(event, GuestStatus.NO)
        notify = self._workspace.settings.notify
        if decision.action is not Decision.DECLINE_AND_NOTIFY or not notify.enabled:
            return False
        notice = compose_decline_notice(
            event,
            self._workspace.identity.effective_user_email(),
            subject_template=notify.subject_template,
            time_format=notify.time_format,
            body=notify.body,
            attribution=notify.attribution,
        )
        self._workspace.mailer.send(notice.recipients, notice.subject, notice.body)
        logger.info("Notified %s", ", ".join(notice.recipients))
        return True


def _row(decision: EventDecision, *, notified: bool) -> dict[str, Any]:
    return {
        "id": decision.event_id,
        "title": decision.title,
        "start": iso(decision.start),
        "end": iso(decision.end),
        "my_status": decision.my_status.value,
        "action": decision.action.value,
        "reason": decision.reason.value,
        "notified": notified,
    }
