"""Command group: guest list inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from caljan.commands._base import CaljanGroup, store_option

if TYPE_CHECKING:
    from caljan.commands._context import AppContext


@click.group(
    cls=CaljanGroup,
    examples="""\
  caljan guests count team@example.com
  caljan guests count a@example.com eng@example.com --threshold 10""",
)
def guests() -> None:
    """Inspect guest lists and group expansion."""


@guests.command(
    examples="""\
  caljan guests count team@example.com
  caljan --json guests count a@example.com eng@example.com --threshold 10""",
)
@click.argument("identifiers", nargs=-1, required=True)
@click.option(
    "--threshold",
    type=int,
    default=None,
    help="Distinct guests needed (default: [guests] large_event_min_guests).",
)
@store_option
@click.pass_obj
def count(
    app: AppContext,
    identifiers: tuple[str, ...],
    threshold: int | None,
    store_path: str | None,
) -> None:
    """Check whether guests expand to a large event."""
    from caljan.services.guests import GuestService

    app.emit(GuestService(app.workspace(store_path)).count(list(identifiers), threshold=threshold))
