"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Successful results are rendered as a collection summary; failures as a
one-line error with optional detail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from menagerie.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from menagerie.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_collect(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="mng.ok")
    op = Text(f"  {result.op}", style="mng.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "mng.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _record_table(records: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for collected records, in insertion order."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="mng.name")
    table.add_column("Species", style="mng.species")
    table.add_column("Age", style="mng.age", justify="right")
    for i, record in enumerate(records, start=1):
        table.add_row(
            str(i),
            Text(str(record.get("name", ""))),
            Text(str(record.get("species", ""))),
            str(record.get("age", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mng.error")
    op = Text(f"  {result.op}", style="mng.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Collection renderer ───────────────────────────────────────────────


def _render_collect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render collect_records: status, count, retry notices, record table."""
    _status_line(console, result)
    records = result.data.get("records", [])
    _field(console, "count", result.data.get("count", len(records)))
    if result.warnings:
        _field(console, "retries", len(result.warnings))
        for warning in result.warnings:
            console.print(Text(f"    {warning}", style="mng.warning"))
    if records:
        console.print(_record_table(records))
    if verbose:
        _render_meta(console, result)

