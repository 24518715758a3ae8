"""Output mode dispatch for ServiceResult.

Humans get Rich-rendered text, machines get ``--json``, scripts get a
single ``--quiet`` line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from caljan.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from caljan.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display in the requested mode."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
