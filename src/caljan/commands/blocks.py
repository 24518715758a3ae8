"""Command: list the do-not-schedule blocks for the look-ahead window."""

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
  caljan blocks
  caljan blocks --now 2026-10-19
  caljan --json blocks""",
)
@store_option
@now_option
@click.pass_obj
def blocks(app: AppContext, store_path: str | None, now: datetime | None) -> None:
    """Show explicit and implicit DNS blocks."""
    from caljan.services.janitor import JanitorService

    app.emit(JanitorService(app.workspace(store_path)).blocks(now=now))
