"""Command: convert the timestamps in a JSON document."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from tznorm.commands._base import TzCommand
from tznorm.domain.types import ConversionDirection, FormatMode

if TYPE_CHECKING:
    from tznorm.commands._context import AppContext

_DIRECTIONS = {
    "to-utc": ConversionDirection.TO_UTC,
    "from-utc": ConversionDirection.FROM_UTC,
}


@click.command(
    cls=TzCommand,
    examples="""\
  tznorm --tz Asia/Kolkata convert request.json --direction to-utc
  curl -s https://api.example.com/schedules | tznorm convert - --direction from-utc
  tznorm convert response.json --direction from-utc --display-mode datetime
  tznorm --json convert response.json --direction from-utc""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--direction",
    type=click.Choice(sorted(_DIRECTIONS)),
    required=True,
    help="to-utc for outgoing bodies, from-utc for incoming ones.",
)
@click.option(
    "--display-mode",
    type=click.Choice([m.value for m in FormatMode if m is not FormatMode.RELATIVE]),
    default=None,
    help="from-utc only: render leaves for display instead of local ISO.",
)
@click.pass_obj
def convert(
    app: AppContext,
    source: TextIO,
    direction: str,
    display_mode: str | None,
) -> None:
    """Convert timestamp fields in a JSON document read from SOURCE (default stdin)."""
    from tznorm.services.payload import PayloadService

    app.emit(
        PayloadService(app.session).convert(
            source.read(), _DIRECTIONS[direction], display_mode=display_mode
        )
    )
