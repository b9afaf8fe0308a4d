"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from menagerie.config.logging import configure_logging
from menagerie.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from menagerie.config.settings import MenagerieSettings
    from menagerie.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MenagerieSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Output a collection result with correct exit semantics.

        * Failure: writes to stderr, exits with code 1.
        * Success with ``--json``: the serialized result (report and retry
          notices included) is the only thing on stdout.
        * Success otherwise: the report and notices are already on stdout;
          ``--verbose`` adds a summary on stderr.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        if settings.json_output:
            click.echo(output)
        elif settings.verbose:
            click.echo(output, err=True)
