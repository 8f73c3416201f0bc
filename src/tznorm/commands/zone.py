"""Command group: active timezone and zone catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tznorm.commands._base import TzGroup

if TYPE_CHECKING:
    from tznorm.commands._context import AppContext


@click.group(
    cls=TzGroup,
    examples="""\
  tznorm zone resolve
  TZNORM_TIMEZONE__PREFERENCE=Asia/Tokyo tznorm zone resolve
  tznorm zone list
  tznorm zone check Europe/Berlin
  tznorm --tz Australia/Sydney zone offset --at 2025-01-15T00:00:00Z""",
)
def zone() -> None:
    """Inspect the active timezone and the zone catalogue."""


@zone.command()
@click.pass_obj
def resolve(app: AppContext) -> None:
    """Show the timezone conversions will use."""
    from tznorm.services.zone import ZoneService

    app.emit(ZoneService(app.session).resolve())


@zone.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List common timezones for pickers."""
    from tznorm.services.zone import ZoneService

    app.emit(ZoneService(app.session).list_zones())


@zone.command()
@click.argument("name")
@click.pass_obj
def check(app: AppContext, name: str) -> None:
    """Validate an IANA timezone NAME."""
    from tznorm.services.zone import ZoneService

    app.emit(ZoneService(app.session).check(name))


@zone.command()
@click.option("--at", default=None, help="Instant to evaluate the offset at (default: now).")
@click.pass_obj
def offset(app: AppContext, at: str | None) -> None:
    """Show the active timezone's UTC offset."""
    from tznorm.services.zone import ZoneService

    app.emit(ZoneService(app.session).offset(at))
