"""Tests for the Rich renderers of check results."""

from __future__ import annotations

from snakecase.config.models import CheckConfig
from snakecase.output.renderers import render_quiet, render_result
from snakecase.services.check import CheckService


def _check(*names: str):
    return CheckService(CheckConfig()).check(names)


class TestRenderCheck:
    def test_ok_table(self) -> None:
        output = render_result(_check("user_id", "_"))
        assert output.startswith("OK")
        assert "'user_id'" in output
        assert "'_'" in output
        assert "2 valid, 0 invalid" in output

    def test_failure_shows_error_and_table(self) -> None:
        output = render_result(_check("user_id", "Bad Name"))
        assert "ERROR" in output
        assert "1 of 2 names are not snake_case" in output
        assert "'Bad Name'" in output
        assert "1 valid, 1 invalid" in output

    def test_verbose_error_detail(self) -> None:
        output = render_result(_check("Bad"), verbose=True)
        assert "detail:" in output
        assert "invalid: ['Bad']" in output

    def test_markup_in_names_is_literal(self) -> None:
        output = render_result(_check("[bold]x"))
        assert "'[bold]x'" in output

    def test_no_ansi_outside_terminal(self) -> None:
        assert "\x1b[" not in render_result(_check("a", "B"))


class TestRenderQuiet:
    def test_lists_invalid_names_only(self) -> None:
        assert render_quiet(_check("ok", "Bad", "also bad")) == "Bad\nalso bad"

    def test_all_valid(self) -> None:
        assert render_quiet(_check("ok")) == "OK: check"

    def test_error_without_items(self) -> None:
        assert render_quiet(_check()) == "ERROR: check — No names to check"
