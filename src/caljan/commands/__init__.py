"""Subcommand modules for caljan.

Provides register_commands() which uses deferred imports to keep
``caljan --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    from caljan.commands.blocks import blocks
    from caljan.commands.clean import clean
    from caljan.commands.guests import guests

    cli.add_command(clean)
    cli.add_command(blocks)
    cli.add_command(guests)
