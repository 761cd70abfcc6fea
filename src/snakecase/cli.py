"""Root CLI group for snakecase with global flags."""

from __future__ import annotations

import click

from snakecase import __version__
from snakecase.commands._context import AppContext
from snakecase.commands.check import check
from snakecase.config.settings import SnakeCaseSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="snakecase")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only print invalid names.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """snakecase — validate snake_case names."""
    settings = SnakeCaseSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
