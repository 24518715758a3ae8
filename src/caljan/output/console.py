"""Rich Console factory and theme for caljan output.

Consoles render to a StringIO buffer so formatting stays a
``ServiceResult -> str`` function. In non-TTY environments (tests, pipes)
Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CALJAN_THEME = Theme(
    {
        "caljan.ok": "bold green",
        "caljan.error": "bold red",
        "caljan.warning": "bold yellow",
        "caljan.op": "bold cyan",
        "caljan.key": "dim",
        "caljan.title": "bold",
        "caljan.action.skip": "dim",
        "caljan.action.decline_silently": "yellow",
        "caljan.action.decline_and_notify": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CALJAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_action(action: str) -> str:
    return f"caljan.action.{action}" if action else ""
