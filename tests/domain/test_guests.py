"""Tests for guest expansion and MinGuestsPredicate."""

from __future__ import annotations

import itertools

import pytest

from caljan.domain.guests import MinGuestsPredicate, NotAGroup, expand_guests
from tests.conftest import FakeDirectory, people


class TestExpandGuests:
    def test_individuals_pass_through(self) -> None:
        directory = FakeDirectory()
        assert list(expand_guests(["a@x", "b@x"], directory)) == ["a@x", "b@x"]

    def test_members_before_subgroups(self) -> None:
        directory = FakeDirectory(
            {
                "eng@x": (["lead@x"], ["backend@x", "frontend@x"]),
                "backend@x": (["b1@x", "b2@x"], []),
                "frontend@x": (["f1@x"], []),
            }
        )
        assert list(expand_guests(["eng@x", "solo@x"], directory)) == [
            "lead@x",
            "b1@x",
            "b2@x",
            "f1@x",
            "solo@x",
        ]

    def test_subgroup_that_is_not_a_group_is_an_individual(self) -> None:
        directory = FakeDirectory({"team@x": ([], ["ghost@x"])})
        assert list(expand_guests(["team@x"], directory)) == ["ghost@x"]

    def test_duplicates_are_not_removed(self) -> None:
        directory = FakeDirectory({"g1@x": (["a@x"], []), "g2@x": (["a@x"], [])})
        assert list(expand_guests(["g1@x", "g2@x"], directory)) == ["a@x", "a@x"]

    def test_is_lazy(self) -> None:
        directory = FakeDirectory()
        stream = expand_guests(["a@x", "b@x", "c@x"], directory)
        assert next(stream) == "a@x"
        assert directory.lookups == ["a@x"]

    def test_directory_errors_propagate(self) -> None:
        class BrokenDirectory:
            def resolve_group(self, identifier: str) -> NotAGroup:
                raise TimeoutError("directory down")

        with pytest.raises(TimeoutError):
            list(expand_guests(["a@x"], BrokenDirectory()))

    def test_cyclic_groups_expand_forever(self) -> None:
        directory = FakeDirectory({"a@x": (["m@x"], ["b@x"]), "b@x": (["n@x"], ["a@x"])})
        head = list(itertools.islice(expand_guests(["a@x"], directory), 6))
        assert head == ["m@x", "n@x", "m@x", "n@x", "m@x", "n@x"]


class TestMinGuestsPredicate:
    def test_threshold_met(self) -> None:
        assert MinGuestsPredicate(people(24), 24, FakeDirectory()).test()

    def test_one_short(self) -> None:
        assert not MinGuestsPredicate(people(23), 24, FakeDirectory()).test()

    def test_duplicates_across_groups_count_once(self) -> None:
        directory = FakeDirectory({"g1@x": (["a@x", "b@x"], []), "g2@x": (["b@x", "c@x"], [])})
        predicate = MinGuestsPredicate(["g1@x", "g2@x"], 4, directory)
        assert not predicate.test()
        assert predicate.seen == 3
        assert MinGuestsPredicate(["g1@x", "g2@x"], 3, directory).test()

    def test_unresolved_identifier_counts_as_one(self) -> None:
        predicate = MinGuestsPredicate(["nobody@x"], 2, FakeDirectory())
        assert not predicate.test()
        assert predicate.seen == 1

    def test_groups_expand_to_threshold(self) -> None:
        directory = FakeDirectory(
            {"all@x": (people(10), ["more@x"]), "more@x": (people(20, "other.com"), [])}
        )
        assert MinGuestsPredicate(["all@x"], 30, directory).test()
        assert not MinGuestsPredicate(["all@x"], 31, directory).test()

    def test_stops_pulling_once_met(self) -> None:
        directory = FakeDirectory({"big@x": (people(5), ["huge@x"])})
        assert MinGuestsPredicate(["big@x", "late@x"], 5, directory).test()
        assert directory.lookups == ["big@x"]

    def test_cyclic_groups_terminate_when_threshold_reachable(self) -> None:
        directory = FakeDirectory({"a@x": (people(3), ["b@x"]), "b@x": (["z@x"], ["a@x"])})
        assert MinGuestsPredicate(["a@x"], 4, directory).test()

    def test_non_positive_threshold(self) -> None:
        directory = FakeDirectory()
        assert MinGuestsPredicate([], 0, directory).test()
        assert directory.lookups == []

    def test_empty_guest_list(self) -> None:
        assert not MinGuestsPredicate([], 1, FakeDirectory()).test()
