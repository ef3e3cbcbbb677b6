"""CLI application for script-list."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.measure import Measurement
from rich.text import Text

from core.errors import ManifestError, ManifestNotFoundError
from core.locate import locate_manifest
from core.models import Manifest, ScriptEntry
from core.parse_node import read_manifest
from core.present import (
    OutputFormat,
    build_table,
    filter_scripts,
    format_count,
    format_json_output,
    format_list_output,
)

__version__ = "0.1.0"

MAX_TABLE_WIDTH = 10_000

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def print_plain(text: str) -> None:
    """Print script text verbatim, without markup, emoji codes or wrapping."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_table(manifest: Manifest, entries: list[ScriptEntry], names_only: bool) -> None:
    heading = manifest.display_name(Path.cwd().name)

    console.print()
    console.print(Text(heading, style="bold green"))
    if manifest.description:
        console.print(Text(manifest.description, style="dim"))
    console.print()
    table = build_table(entries, names_only=names_only)
    # Rows stay on one line even when wider than the terminal
    natural = Measurement.get(console, console.options.update_width(MAX_TABLE_WIDTH), table).maximum
    Console(width=max(console.width, natural)).print(table)
    console.print()
    console.print(format_count(len(entries)))


def print_no_scripts(manifest: Manifest, pattern: str | None) -> None:
    if manifest.scripts and pattern:
        message = f"No scripts matching '{pattern}'"
    else:
        message = f"No scripts found in {manifest.path}"
    console.print(Text(message, style="yellow"))


def version_callback(value: bool) -> None:
    if value:
        console.print(f"sl {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="sl",
    help="List the scripts declared in a package.json",
    add_completion=False,
)


@app.command()
def list_scripts(
    path: str | None = typer.Option(
        None, "--path", "-p", envvar="SL_PATH", help="Path to package.json (default: ./package.json)"
    ),
    pattern: str | None = typer.Option(
        None, "--filter", "-f", help="Only show scripts whose name contains this text (case-insensitive)"
    ),
    format_type: OutputFormat = typer.Option(
        OutputFormat.table, "--format", "-F", envvar="SL_FORMAT", case_sensitive=False, help="Output format"
    ),
    names_only: bool = typer.Option(False, "--names-only", "-n", help="Show script names without commands"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """List npm scripts from package.json."""
    configure_logging(verbose)

    try:
        manifest_path = locate_manifest(path)
        manifest = read_manifest(manifest_path)
    except ManifestNotFoundError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        searched = (e.path.parent if e.path else Path(".")).resolve()
        err_console.print(f"Searched in {searched}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    except ManifestError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    entries = filter_scripts(manifest.entries(), pattern)
    logger.debug("Rendering %d script(s) as %s", len(entries), format_type.value)

    if format_type == OutputFormat.json:
        print_plain(format_json_output(entries, names_only=names_only))
        return

    if not entries:
        print_no_scripts(manifest, pattern)
        return

    if format_type == OutputFormat.list:
        print_plain(format_list_output(entries, names_only=names_only))
    else:
        print_table(manifest, entries, names_only)


if __name__ == "__main__":
    app()
