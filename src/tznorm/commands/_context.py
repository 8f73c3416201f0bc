"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``.  Builds the TimeSession lazily and centralises result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tznorm.config.logging import configure_logging
from tznorm.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tznorm.config.settings import TznormSettings
    from tznorm.services.result import ServiceResult
    from tznorm.services.session import TimeSession


class AppContext:
    """State shared through Click's command hierarchy.

    The session is created on first use so ``--help`` and ``--version``
    never touch zone detection.
    """

    def __init__(self, settings: TznormSettings) -> None:
        self.settings = settings
        self._session: TimeSession | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def session(self) -> TimeSession:
        if self._session is None:
            from tznorm.services.session import TimeSession

            self._session = TimeSession.from_settings(self.settings)
        return self._session

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and apply exit semantics.

        * Success: stdout; warnings go to stderr unless they are already
          part of the JSON payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
