"""Command: wall-clock time to UTC instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tznorm.commands._base import TzCommand

if TYPE_CHECKING:
    from tznorm.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tznorm --tz Europe/Paris localize "2025-06-01 09:00"
  tznorm --tz America/New_York localize "2025-03-09 02:30"   # spring-forward gap
  tznorm --tz America/New_York localize "2025-11-02 01:30"   # fall-back overlap
  tznorm --tz Asia/Kolkata localize --schedule 202506010930""",
)
@click.argument("wall_time")
@click.option("--schedule", is_flag=True, help="Read WALL_TIME as a YYYYMMDDHHMI schedule stamp.")
@click.pass_obj
def localize(app: AppContext, wall_time: str, schedule: bool) -> None:
    """Convert a zone-less WALL_TIME in the active timezone to UTC."""
    from tznorm.services.render import RenderService

    app.emit(RenderService(app.session).localize(wall_time, schedule=schedule))
