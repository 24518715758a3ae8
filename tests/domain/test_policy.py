"""Tests for the per-event decision policy."""

from __future__ import annotations

from datetime import datetime

from caljan.domain.blocks import build_dns_blocks
from caljan.domain.policy import decide
from caljan.domain.types import Decision, DecisionReason, GuestStatus
from tests.conftest import NOW, FakeDirectory, make_event, people

BLOCKS = build_dns_blocks([], window_start=NOW, days=14)


class TestDecide:
    def test_small_conflicting_invitation_is_declined_with_notice(self) -> None:
        decision = decide(make_event(guests=people(10)), BLOCKS, directory=FakeDirectory())
        assert decision.action is Decision.DECLINE_AND_NOTIFY
        assert decision.reason is DecisionReason.CONFLICT
        assert decision.declines

    def test_large_event_is_kept(self) -> None:
        decision = decide(make_event(guests=people(30)), BLOCKS, directory=FakeDirectory())
        assert decision.action is Decision.SKIP
        assert decision.reason is DecisionReason.LARGE_EVENT
        assert not decision.declines

    def test_hidden_guests_declined_silently_without_lookup(self) -> None:
        directory = FakeDirectory()
        event = make_event(guests=people(30), guests_can_see_guests=False)
        decision = decide(event, BLOCKS, directory=directory)
        assert decision.action is Decision.DECLINE_SILENTLY
        assert decision.reason is DecisionReason.GUESTS_HIDDEN
        assert directory.lookups == []

    def test_no_conflict(self) -> None:
        directory = FakeDirectory()
        event = make_event(start=datetime(2026, 10, 20, 10, 0), guests=people(3))
        decision = decide(event, BLOCKS, directory=directory)
        assert decision.action is Decision.SKIP
        assert decision.reason is DecisionReason.NO_CONFLICT
        assert directory.lookups == []

    def test_ending_at_block_start_is_no_conflict(self) -> None:
        event = make_event(start=datetime(2026, 10, 20, 8, 0))
        assert decide(event, BLOCKS, directory=FakeDirectory()).reason is DecisionReason.NO_CONFLICT

    def test_only_pending_invitations_are_considered(self) -> None:
        for status in (GuestStatus.YES, GuestStatus.NO, GuestStatus.MAYBE, GuestStatus.OWNER):
            decision = decide(make_event(my_status=status), BLOCKS, directory=FakeDirectory())
            assert decision.action is Decision.SKIP
            assert decision.reason is DecisionReason.NOT_INVITED
            assert decision.my_status is status

    def test_explicit_block(self) -> None:
        focus = make_event(
            "focus",
            title="DNS focus",
            start=datetime(2026, 10, 21, 14, 0),
            minutes=120,
            my_status=GuestStatus.OWNER,
        )
        blocks = build_dns_blocks([focus], window_start=NOW, days=14)
        invite = make_event("invite", start=datetime(2026, 10, 21, 15, 0))
        assert decide(invite, blocks, directory=FakeDirectory()).declines
        assert not decide(focus, blocks, directory=FakeDirectory()).declines

    def test_custom_threshold(self) -> None:
        event = make_event(guests=people(5))
        assert not decide(event, BLOCKS, directory=FakeDirectory(), min_guests=5).declines
        assert decide(event, BLOCKS, directory=FakeDirectory(), min_guests=6).declines

    def test_decision_carries_event_fields(self) -> None:
        event = make_event("abc", title="Standup")
        decision = decide(event, BLOCKS, directory=FakeDirectory())
        assert decision.event_id == "abc"
        assert decision.title == "Standup"
        assert decision.start == event.start
        assert decision.end == event.end
