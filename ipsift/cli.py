"""Click CLI with Rich output."""

from __future__ import annotations

import json as json_lib
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ALL_COUNTRIES
from .engine import filter_records
from .log import setup_logging
from .session import ExtractionSession

console = Console()
err_console = Console(stderr=True)

_files_argument = click.argument(
    "files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_clipboard_option = click.option(
    "--clipboard", is_flag=True, help="Read input from the system clipboard."
)


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")
    sys.exit(1)


def _read_input(files: tuple[Path, ...], clipboard: bool) -> str:
    """Collect raw text from the clipboard, the given files, or stdin."""
    if clipboard:
        from .clipboard import ClipboardError, paste

        try:
            return paste()
        except ClipboardError as exc:
            _fail(str(exc))
    if files:
        from .sources import read_sources

        return read_sources(files)
    return click.get_text_stream("stdin").read()


def _select(session: ExtractionSession, country: str) -> None:
    session.select_country(country)
    if country not in session.selector_values:
        err_console.print(
            f"[yellow]Unknown country {country!r}.[/yellow] "
            f"Choose from: {', '.join(session.selector_values)}"
        )


def _load_session(text: str, country: str = ALL_COUNTRIES) -> ExtractionSession:
    session = ExtractionSession()
    session.process(text)
    _select(session, country)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """ipsift — extract IP:port endpoints and country markers from messy text."""
    setup_logging("DEBUG" if verbose else None)


@cli.command()
@_files_argument
@_clipboard_option
@click.option(
    "-c", "--country", default=ALL_COUNTRIES, show_default=True,
    help="Only output endpoints tagged with this country code.",
)
@click.option("--hide-port", is_flag=True, help="Print addresses without ports.")
@click.option("--ai", "use_ai", is_flag=True, help="Pre-extract with the Gemini API.")
@click.option("--prompt", default="", help="Extra instruction for --ai.")
@click.option(
    "-o", "--output", type=click.Path(path_type=Path),
    help="Write the result to this file or directory.",
)
@click.option("--save", is_flag=True, help="Write the result to the downloads folder.")
@click.option("--copy", is_flag=True, help="Copy the result to the clipboard.")
@click.option("--json", "as_json", is_flag=True, help="Output records as JSON.")
def extract(
    files: tuple[Path, ...],
    clipboard: bool,
    country: str,
    hide_port: bool,
    use_ai: bool,
    prompt: str,
    output: Path | None,
    save: bool,
    copy: bool,
    as_json: bool,
):
    """Extract endpoints from FILES (or stdin) and print them one per line."""
    text = _read_input(files, clipboard)
    session = ExtractionSession(hide_port=hide_port)

    if use_ai:
        from .ai import AIServiceError, GeminiClient

        try:
            with err_console.status("Asking the AI service..."):
                session.process_with_ai(text, GeminiClient.from_env(), prompt)
        except AIServiceError as exc:
            _fail(str(exc))
    else:
        session.process(text)

    _select(session, country)
    result = session.output

    if as_json:
        data = {
            "country": session.selected_country,
            "total": session.stats.total,
            "filtered_count": session.stats.filtered_count,
            "records": [
                {
                    "address": r.address,
                    "port": r.port or None,
                    "country": r.country,
                    "line": r.source_line,
                }
                for r in filter_records(session.records, session.selected_country)
            ],
        }
        click.echo(json_lib.dumps(data, indent=2))
    elif result:
        click.echo(result)

    stats = session.stats
    err_console.print(
        f"[dim]{stats.filtered_count} of {stats.total} endpoint(s) "
        f"(country: {session.selected_country})[/dim]"
    )

    if output or save:
        from .export import save_output

        path = save_output(result, output, session.selected_country)
        if path:
            err_console.print(f"[green]Saved[/green] {escape(str(path))}")
        else:
            err_console.print("[yellow]Nothing to save.[/yellow]")

    if copy and result:
        from .clipboard import ClipboardError
        from .clipboard import copy as copy_text

        try:
            copy_text(result)
        except ClipboardError as exc:
            _fail(str(exc))
        err_console.print("[green]Copied to clipboard.[/green]")


@cli.command()
@_files_argument
@_clipboard_option
def countries(files: tuple[Path, ...], clipboard: bool):
    """List the country markers found in the input."""
    session = _load_session(_read_input(files, clipboard))

    if not session.records:
        console.print("[yellow]No IPv4 endpoints found.[/yellow]")
        return

    table = Table(title="Countries", show_header=True, header_style="bold")
    table.add_column("Country")
    table.add_column("Endpoints", justify="right")

    for code in session.countries:
        session.select_country(code)
        table.add_row(code, str(session.stats.filtered_count))

    console.print(table)


@cli.command()
@_files_argument
@_clipboard_option
@click.option("-c", "--country", default=ALL_COUNTRIES, show_default=True)
def stats(files: tuple[Path, ...], clipboard: bool, country: str):
    """Show endpoint counts for the input."""
    session = _load_session(_read_input(files, clipboard), country)
    data = session.stats

    table = Table(title="Endpoint Statistics", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Total endpoints", str(data.total))
    table.add_row(f"Matching {session.selected_country}", str(data.filtered_count))
    table.add_row("Countries", str(len(session.countries)))

    console.print(table)
