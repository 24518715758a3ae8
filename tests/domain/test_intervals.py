"""Tests for the interval overlap predicate."""

from datetime import datetime, timedelta

import pytest

from caljan.domain.intervals import TimeInterval, overlaps, overlaps_any

T0 = datetime(2026, 10, 20, 9, 0)


def span(start_min: int, end_min: int) -> TimeInterval:
    return TimeInterval(start=T0 + timedelta(minutes=start_min), end=T0 + timedelta(minutes=end_min))


class TestOverlaps:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (span(0, 60), span(30, 90), True),
            (span(0, 60), span(10, 20), True),
            (span(0, 60), span(0, 60), True),
            (span(0, 60), span(60, 120), False),
            (span(0, 60), span(90, 120), False),
            (span(30, 30), span(0, 60), True),
            (span(0, 0), span(0, 60), False),
            (span(0, 0), span(0, 0), False),
        ],
    )
    def test_symmetric(self, a: TimeInterval, b: TimeInterval, expected: bool) -> None:
        assert overlaps(a, b) is expected
        assert overlaps(b, a) is expected

    def test_touching_endpoints_do_not_overlap(self) -> None:
        assert not overlaps(span(0, 60), span(60, 61))
        assert overlaps(span(0, 60), span(59, 61))

    def test_inverted_interval_is_not_rejected(self) -> None:
        inverted = span(60, 0)
        assert not overlaps(inverted, span(0, 60))


class TestOverlapsAny:
    def test_any_match(self) -> None:
        assert overlaps_any(span(0, 60), [span(100, 120), span(50, 70)])

    def test_no_blocks(self) -> None:
        assert not overlaps_any(span(0, 60), [])

    def test_short_circuits(self) -> None:
        def blocks():
            yield span(0, 10)
            raise AssertionError("pulled past the first match")

        assert overlaps_any(span(0, 60), blocks())
