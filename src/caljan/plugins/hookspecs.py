"""Pluggy hook specifications for caljan lifecycle events.

Hooks are dispatched synchronously, in the order the janitor acts.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("caljan")
hookimpl = pluggy.HookimplMarker("caljan")


class CaljanHookSpec:
    """Hook specifications for the caljan plugin system."""

    @hookspec
    def post_decline(self, event_id: str, title: str, notified: bool) -> None:
        """Called after an invitation was declined (and notified, if *notified*)."""

    @hookspec
    def post_clean(self, declined: int, skipped: int) -> None:
        """Called after a clean run completed without aborting."""
