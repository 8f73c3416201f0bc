"""Command: render an instant for display."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tznorm.commands._base import TzCommand
from tznorm.domain.types import FormatMode

if TYPE_CHECKING:
    from tznorm.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tznorm show 2025-01-01T00:00:00.000Z
  tznorm --tz America/New_York show 2025-07-04T16:00:00Z --mode full
  tznorm show 2025-01-01T00:00:00Z --mode relative --now 2025-01-01T00:05:00Z
  tznorm show "2025-01-01 09:30:00" --show-timezone""",
)
@click.argument("instant")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in FormatMode]),
    default=None,
    help="Display mode (default from [display] config).",
)
@click.option("--now", default=None, help="Reference instant for relative mode.")
@click.option(
    "--show-timezone/--hide-timezone",
    default=None,
    help="Append the zone name to the primary text.",
)
@click.pass_obj
def show(
    app: AppContext,
    instant: str,
    mode: str | None,
    now: str | None,
    show_timezone: bool | None,
) -> None:
    """Render a UTC instant in the active timezone."""
    from tznorm.services.render import RenderService

    app.emit(
        RenderService(app.session).show(instant, mode=mode, now=now, show_timezone=show_timezone)
    )
