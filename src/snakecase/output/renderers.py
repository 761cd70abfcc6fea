"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from snakecase.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from snakecase.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _status_line(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: invalid names only."""
    invalid = [
        str(item["name"]) for item in result.data.get("items", []) if not item.get("valid")
    ]
    if invalid:
        return "\n".join(invalid)
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="sc.ok")
    op = Text(f"  {result.op}", style="sc.op")
    console.print(label, op)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sc.error")
    op = Text(f"  {result.op}", style="sc.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for key, value in result.data.items():
        console.print(Text(f"  {key}:", style="sc.key"), Text(str(value)))


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Table of every checked name plus a count summary."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="sc.name", no_wrap=True)
    table.add_column("Valid")

    for item in items:
        if item.get("valid"):
            mark = Text("yes", style="sc.valid")
        else:
            mark = Text("no", style="sc.invalid")
        table.add_row(Text(repr(item.get("name", ""))), mark)

    console.print(table)
    summary = (
        f"  {result.data.get('valid_count', 0)} valid, "
        f"{result.data.get('invalid_count', 0)} invalid"
    )
    if verbose and "path" in result.data:
        summary += f" ({result.data['path']})"
    console.print(Text(summary, style="sc.key"))


_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "check_file": _render_check,
}
