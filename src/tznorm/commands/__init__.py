"""Subcommand modules for tznorm.

``register_commands()`` defers imports so ``tznorm --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the zone group and the standalone commands on the root group."""
    from tznorm.commands.classify import classify
    from tznorm.commands.convert import convert
    from tznorm.commands.localize import localize
    from tznorm.commands.show import show
    from tznorm.commands.zone import zone

    cli.add_command(zone)
    cli.add_command(show)
    cli.add_command(localize)
    cli.add_command(classify)
    cli.add_command(convert)
