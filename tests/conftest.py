"""Shared pytest fixtures and test helpers for caljan tests."""

from __future__ import annotations

import json
import time
from collections.abc import Generator, Sequence
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from caljan.config.settings import CaljanSettings
from caljan.domain.events import CalendarEvent, Guest
from caljan.domain.guests import GroupResolution, NotAGroup, ResolvedGroup
from caljan.domain.types import GuestStatus
from caljan.infrastructure.workspace import Workspace
from caljan.services.telemetry import disable_telemetry

NOW = datetime(2026, 10, 19, 12, 0)
USER = "me@example.com"


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeDirectory:
    """Group directory backed by a dict of ``group -> (members, subgroups)``."""

    def __init__(self, groups: dict[str, tuple[list[str], list[str]]] | None = None) -> None:
        self.groups = groups or {}
        self.lookups: list[str] = []

    def resolve_group(self, identifier: str) -> GroupResolution:
        self.lookups.append(identifier)
        if identifier not in self.groups:
            return NotAGroup(identifier=identifier)
        members, subgroups = self.groups[identifier]
        return ResolvedGroup(identifier=identifier, members=members, subgroups=subgroups)


class FakeCalendar:
    def __init__(self, events: Sequence[CalendarEvent]) -> None:
        self.events = {e.id: e for e in events}
        self.writes: list[tuple[str, GuestStatus]] = []

    def get_events(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        return [e for e in self.events.values() if e.start < end and start < e.end]

    def set_my_status(self, event: CalendarEvent, status: GuestStatus) -> None:
        self.writes.append((event.id, status))
        self.events[event.id] = event.model_copy(update={"my_status": status})


class RecordingMailer:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[list[str], str, str]] = []

    def send(self, recipients: Sequence[str], subject: str, body: str) -> None:
        if self.fail:
            raise ConnectionError("SMTP unavailable")
        self.sent.append((list(recipients), subject, body))


class FixedIdentity:
    def effective_user_email(self) -> str:
        return USER


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_event(
    event_id: str = "e1",
    *,
    start: datetime | None = None,
    minutes: int = 30,
    guests: Sequence[str] = (),
    **kwargs: Any,
) -> CalendarEvent:
    """A 30-minute pending invitation at 07:00 tomorrow (inside the quiet period)."""
    start = start or datetime(2026, 10, 20, 7, 0)
    kwargs.setdefault("title", f"Event {event_id}")
    kwargs.setdefault("creators", ["organizer@example.com"])
    return CalendarEvent(
        id=event_id,
        start=start,
        end=start + timedelta(minutes=minutes),
        guests=[Guest(email=g) for g in guests],
        **kwargs,
    )


def people(count: int, domain: str = "example.com") -> list[str]:
    return [f"guest{i}@{domain}" for i in range(count)]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Verbose CLI runs leave telemetry enabled; switch it off after each test."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CaljanSettings:
    """Default settings rooted at an empty temp directory."""
    monkeypatch.delenv("CALJAN_CONFIG", raising=False)
    return CaljanSettings.from_cli(root=tmp_path)


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


def make_workspace(
    settings: CaljanSettings,
    events: Sequence[CalendarEvent],
    *,
    directory: FakeDirectory | None = None,
    mailer: RecordingMailer | None = None,
) -> Workspace:
    return Workspace(
        settings,
        calendar=FakeCalendar(events),
        directory=directory or FakeDirectory(),
        mailer=mailer or RecordingMailer(),
        identity=FixedIdentity(),
    )


def write_store(path: Path, events: list[dict[str, Any]], **extra: Any) -> Path:
    """Write a JSON calendar store document to *path*."""
    document = {"user": USER, "events": events, **extra}
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def store_events() -> list[dict[str, Any]]:
    """Events for store-backed tests: one conflict, one large event, one free slot."""
    return [
        {
            "id": "early",
            "title": "Early sync",
            "start": "2026-10-20T07:00:00",
            "end": "2026-10-20T07:30:00",
            "guests": [{"email": "a@example.com"}, {"email": "b@example.com"}],
            "creators": ["organizer@example.com"],
        },
        {
            "id": "allhands",
            "title": "All hands",
            "start": "2026-10-21T07:00:00",
            "end": "2026-10-21T08:00:00",
            "guests": [{"email": "everyone@example.com"}],
            "creators": ["ceo@example.com"],
        },
        {
            "id": "lunch",
            "title": "Lunch",
            "start": "2026-10-20T12:00:00",
            "end": "2026-10-20T13:00:00",
            "creators": ["friend@example.com"],
        },
    ]


@pytest.fixture
def store_path(tmp_path: Path, store_events: list[dict[str, Any]]) -> Path:
    groups = {"everyone@example.com": {"members": people(30), "subgroups": []}}
    return write_store(tmp_path / "calendar.json", store_events, groups=groups)


@pytest.fixture
def _isolated_store(store_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the store's directory so the CLI finds ``calendar.json``.

    Use via ``@pytest.mark.usefixtures("_isolated_store")``.
    """
    monkeypatch.delenv("CALJAN_CONFIG", raising=False)
    monkeypatch.chdir(store_path.parent)


@pytest.fixture
def _berlin_local_time(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Switch the process-local timezone to Europe/Berlin for one test.

    Use via ``@pytest.mark.usefixtures("_berlin_local_time")``.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Europe/Berlin")
    time.tzset()
    try:
        if time.tzname != ("CET", "CEST"):
            pytest.skip("Europe/Berlin zone data is not installed")
        yield
    finally:
        monkeypatch.undo()
        time.tzset()
