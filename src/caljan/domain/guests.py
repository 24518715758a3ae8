"""Guest expansion — lazy recursive group resolution and the min-guests check.

INVARIANT: Expansion is pull-based. ``MinGuestsPredicate.test`` stops
pulling once its threshold is met, which is what keeps large (or cyclic)
group graphs from being walked in full. Never collect the expansion into a
list.

Cyclic groups are not detected: a consumer that pulls without bound from
a cyclic graph never terminates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from caljan.domain.collaborators import GroupDirectory

logger = logging.getLogger(__name__)


class ResolvedGroup(BaseModel):
    """Successful resolution: the identifier is a group."""

    model_config = {"frozen": True}

    identifier: str
    members: list[str] = Field(default_factory=list)
    subgroups: list[str] = Field(default_factory=list)


class NotAGroup(BaseModel):
    """Failed resolution: the identifier is treated as one individual."""

    model_config = {"frozen": True}

    identifier: str


GroupResolution = ResolvedGroup | NotAGroup


def expand_guests(identifiers: Iterable[str], directory: GroupDirectory) -> Iterator[str]:
    """Yield individual guest identifiers, expanding groups depth-first.

    For each group: its direct members first, then each subgroup expanded
    recursively. Identifiers that are not groups are yielded unchanged.
    Values are not deduplicated here.
    """
    for identifier in identifiers:
        resolution = directory.resolve_group(identifier)
        if isinstance(resolution, NotAGroup):
            yield identifier
            continue
        logger.debug(
            "Expanding group %s (%d members, %d subgroups)",
            identifier,
            len(resolution.members),
            len(resolution.subgroups),
        )
        yield from resolution.members
        yield from expand_guests(resolution.subgroups, directory)


class MinGuestsPredicate:
    """Whether a guest list expands to at least *threshold* distinct guests."""

    def __init__(self, guests: Iterable[str], threshold: int, directory: GroupDirectory) -> None:
        self._guests = guests
        self._threshold = threshold
        self._directory = directory
        self.seen = 0

    def test(self) -> bool:
        """Pull expanded guests until *threshold* distinct values are seen.

        ``seen`` holds the number of distinct guests counted by the last call.
        """
        distinct: set[str] = set()
        self.seen = 0
        if self._threshold <= 0:
            return True
        for guest in expand_guests(self._guests, self._directory):
            distinct.add(guest)
            self.seen = len(distinct)
            if self.seen >= self._threshold:
                return True
        return False
