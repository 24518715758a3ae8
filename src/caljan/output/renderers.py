"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from caljan.output.console import create_console, get_output, style_for_action

if TYPE_CHECKING:
    from rich.console import Console

    from caljan.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string (plain text when not on a terminal)."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose:
        _render_meta(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line: the op status, with the decline count for clean runs."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "clean":
        return f"OK: clean declined={result.data.get('declined', 0)}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="caljan.ok"), Text(f"  {result.op}", style="caljan.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="caljan.key"), Text(str(value)), sep="")


def _render_meta(result: ServiceResult, console: Console) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    console.print(f"{' ' * indent}{span.get('name', '?')}  {span.get('duration_ms', 0.0):.2f}ms")
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


# ── Per-op renderers ─────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text("ERROR", style="caljan.error"), Text(f"  {result.op} - {msg}"))
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_clean(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "window", f"{data['window_start']} -> {data['window_end']}")
    if data.get("dry_run"):
        _field(console, "dry_run", True)
    summary = f"{data['declined']} declined, {data['skipped']} skipped, {data['notified']} notified"
    _field(console, "summary", summary)

    declines = [item for item in data["items"] if item["action"] != "skip"]
    if not declines:
        return
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Start")
    table.add_column("Title", style="caljan.title")
    table.add_column("Action")
    table.add_column("Reason", style="dim")
    for item in declines:
        table.add_row(
            item["start"],
            item["title"],
            Text(item["action"], style=style_for_action(item["action"])),
            item["reason"],
        )
    console.print(table)


def _render_blocks(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "count", result.data["count"])
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Kind")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Title", style="caljan.title")
    for item in result.data["items"]:
        table.add_row(item["kind"], item["start"], item["end"], item["title"])
    console.print(table)


def _render_count_guests(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    verdict = "large event" if data["met"] else "below threshold"
    _field(console, "verdict", f"{verdict} ({data['seen']} seen, threshold {data['threshold']})")


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "clean": _render_clean,
    "blocks": _render_blocks,
    "count_guests": _render_count_guests,
}
