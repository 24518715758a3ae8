"""Command: decline pending invitations inside DNS blocks."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from caljan.commands._base import CaljanCommand, now_option, store_option

if TYPE_CHECKING:
    from caljan.commands._context import AppContext


@click.command(
    cls=CaljanCommand,
    examples="""\
  caljan clean
  caljan clean --dry-run
  caljan clean --store ~/calendar.json --now 2026-10-19T09:00
  caljan --json clean --dry-run""",
)
@store_option
@now_option
@click.option("--dry-run", is_flag=True, help="Report decisions without declining or emailing.")
@click.pass_obj
def clean(app: AppContext, store_path: str | None, now: datetime | None, dry_run: bool) -> None:
    """Decline invitations that overlap do-not-schedule blocks."""
    from caljan.services.janitor import JanitorService

    app.emit(JanitorService(app.workspace(store_path)).clean(now=now, dry_run=dry_run))
