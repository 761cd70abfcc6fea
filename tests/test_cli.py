"""Tests for the root snakecase CLI."""

from click.testing import CliRunner

from snakecase import __version__
from snakecase.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "snakecase" in result.output
    assert "check" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_check_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["check", "--help"])
    assert result.exit_code == 0
    for keyword in ("NAMES", "--file", "--fail-fast", "--examples"):
        assert keyword in result.output
