"""Command: validate candidate names against the snake_case grammar."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from snakecase.commands._base import SnakeCaseCommand

if TYPE_CHECKING:
    from snakecase.commands._context import AppContext


@click.command(
    cls=SnakeCaseCommand,
    examples="""\
  snakecase check user_id _private table42
  snakecase check --fail-fast userId user_id
  snakecase check --file names.txt
  snakecase --json check --file names.txt
  snakecase -q check --file names.txt""",
)
@click.argument("names", nargs=-1)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read names from a file, one per line.",
)
@click.option("--fail-fast", is_flag=True, help="Stop at the first invalid name.")
@click.pass_obj
def check(
    app: AppContext,
    names: tuple[str, ...],
    file_path: Path | None,
    fail_fast: bool,
) -> None:
    """Check that each NAME is valid snake_case."""
    from snakecase.services.check import CheckService

    if names and file_path is not None:
        raise click.UsageError("Pass names or --file, not both.")

    config = app.settings.check
    if fail_fast:
        config = config.model_copy(update={"fail_fast": True})
    svc = CheckService(config)

    if file_path is not None:
        app.emit(svc.check_file(file_path))
    else:
        app.emit(svc.check(names))
