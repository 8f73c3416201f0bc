"""Rich Console factory and theme for tznorm output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  Rich drops color codes when there is no terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZ_THEME = Theme(
    {
        "tz.ok": "bold green",
        "tz.error": "bold red",
        "tz.warning": "bold yellow",
        "tz.op": "bold cyan",
        "tz.key": "dim",
        "tz.zone": "bold blue",
        "tz.instant": "magenta",
        "tz.text": "bold",
        "tz.match": "green",
        "tz.miss": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
