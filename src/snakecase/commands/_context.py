"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snakecase.config.logging import configure_logging
from snakecase.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from snakecase.config.settings import SnakeCaseSettings
    from snakecase.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SnakeCaseSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Write *result* and exit 1 if it failed.

        Successes go to stdout and failures to stderr. Warnings go to stderr
        unless they are already part of the JSON payload.
        """
        json_output = self.settings.json_output
        settings = OutputSettings(
            json_output=json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        click.echo(format_result(result, settings=settings), err=not result.ok)
        if not json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
