"""Swim Tally CLI application.

Usage:
    swimtally parse session.txt
    swimtally parse session.txt --lines
    swimtally parse - --json < session.txt
    swimtally check session.txt --pool-length 50
"""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env file for settings
load_dotenv()
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from swimtally import bind_context, clear_context, configure_logging, get_logger
from swimtally.config import get_settings
from swimtally.models import Activity, ParseResult, Stroke
from swimtally.parser import parse_session
from swimtally.services import check_totals

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

app = typer.Typer(
    name="swimtally",
    help="Tally swim session distances by stroke and activity",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    configure_logging(stream=sys.stderr)
    clear_context()


def _read_session(source: str) -> str:
    """Read session text from a file path, or stdin when source is '-'."""
    bind_context(source=source)
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error: cannot read {escape(source)}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None


def _metres(value: float) -> str:
    return f"{value:g}"


def _totals_table(result: ParseResult) -> Table:
    totals = result.totals
    table = Table(title="Session Totals (m)")
    table.add_column("Stroke", style="cyan")
    for activity in Activity:
        table.add_column(activity.display_name, justify="right")
    table.add_column("Total", justify="right", style="bold")

    by_stroke = totals.by_stroke()
    for stroke in Stroke:
        if not by_stroke[stroke]:
            continue
        cells = [
            _metres(value) if (value := totals.get(stroke, activity)) else "-"
            for activity in Activity
        ]
        table.add_row(stroke.display_name, *cells, _metres(by_stroke[stroke]))

    by_activity = totals.by_activity()
    table.add_row(
        "Total",
        *[_metres(by_activity[activity]) for activity in Activity],
        _metres(totals.total_distance),
        style="bold",
    )
    return table


def _lines_table(result: ParseResult) -> Table:
    table = Table(title="Lines")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Text")
    table.add_column("Contributions")
    table.add_column("Note")

    for line in result.parsed_lines:
        if line.is_blank:
            continue
        contributions = ", ".join(
            f"{c.stroke.display_name} {c.activity.display_name} {_metres(c.distance)}"
            for c in line.contributions
        )
        if line.warning:
            note = f"[yellow]{escape(line.warning)}[/yellow]"
        elif not line.parsed:
            note = f"[dim]{line.reason or 'skipped'}[/dim]"
        else:
            note = ""
        table.add_row(
            str(line.line_number), escape(line.original_text.strip()), contributions, note
        )
    return table


def _print_summary(result: ParseResult) -> None:
    console.print(
        f"Parsed: [green]{result.success_count}[/green]  "
        f"Warnings: [yellow]{result.warning_count}[/yellow]  "
        f"Errors: [red]{result.error_count}[/red]  "
        f"Unparsed: {len(result.unparsed_lines)}"
    )


@app.command("parse")
def parse_command(
    source: str = typer.Argument(..., help="Session text file, or '-' for stdin"),
    lines: bool = typer.Option(False, "--lines", "-l", help="Show the per-line audit"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    split_slash: bool | None = typer.Option(
        None,
        "--split-slash/--no-split-slash",
        help="Split 'FC/BK' lines evenly across the strokes",
    ),
):
    """Parse a session and show distance totals."""
    text = _read_session(source)
    options = get_settings().parser_options(split_slash_strokes=split_slash)
    result = parse_session(text, options)

    if as_json:
        typer.echo(result.model_dump_json(indent=2, by_alias=True))
        return

    console.print(_totals_table(result))
    if lines:
        console.print(_lines_table(result))
    _print_summary(result)


@app.command("check")
def check_command(
    source: str = typer.Argument(..., help="Session text file, or '-' for stdin"),
    pool_length: int | None = typer.Option(
        None, "--pool-length", "-p", help="Pool length in metres (default from settings)"
    ),
):
    """Parse a session and sanity-check the totals against the pool length."""
    settings = get_settings()
    text = _read_session(source)
    result = parse_session(text, settings.parser_options())
    pool = settings.pool_length if pool_length is None else pool_length

    try:
        validation = check_totals(result.totals, pool_length=pool)
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    console.print(f"Total distance: [bold]{_metres(result.totals.total_distance)}m[/bold]")
    for issue in validation.errors:
        console.print(f"[red]Error ({issue.field}): {issue.message}[/red]")
    for issue in validation.warnings:
        console.print(f"[yellow]Warning ({issue.field}): {issue.message}[/yellow]")
    for line in result.warnings:
        console.print(f"[yellow]Line {line.line_number}: {escape(line.warning)}[/yellow]")

    logger.info(
        "totals_checked",
        pool_length=pool,
        valid=validation.valid,
        errors=len(validation.errors),
        warnings=len(validation.warnings),
    )

    if not validation.valid:
        raise typer.Exit(1)
    console.print("[green]Totals look consistent[/green]")


if __name__ == "__main__":
    app()
