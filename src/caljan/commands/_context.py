"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and telemetry, builds the
workspace on demand, and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from caljan.config.logging import configure_logging
from caljan.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from caljan.config.settings import CaljanSettings
    from caljan.infrastructure.workspace import Workspace
    from caljan.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CaljanSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from caljan.services.telemetry import enable_telemetry

            enable_telemetry()

    def workspace(self, store_path: str | None = None) -> Workspace:
        """A workspace over the configured (or *store_path*) calendar store."""
        from caljan.infrastructure.workspace import Workspace

        ws = Workspace(self.settings, store_path=store_path)
        ws.init_plugins()
        return ws

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr (except in JSON
          mode, where they are part of the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
