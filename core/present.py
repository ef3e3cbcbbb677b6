"""Filtering and rendering of script entries."""

import json
import logging
from enum import Enum

from rich import box
from rich.table import Table
from rich.text import Text

from .models import ScriptEntry

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Supported output formats."""

    table = "table"
    list = "list"
    json = "json"


def filter_scripts(
    entries: list[ScriptEntry], pattern: str | None
) -> list[ScriptEntry]:
    """Keep entries whose name contains pattern, ignoring case.

    Args:
        entries: Script entries to filter
        pattern: Substring to look for; None or "" keeps everything

    Returns:
        Matching entries in their original order
    """
    if not pattern:
        return list(entries)

    needle = pattern.lower()
    matched = [entry for entry in entries if needle in entry.name.lower()]
    logger.debug("Filter %r kept %d of %d script(s)", pattern, len(matched), len(entries))
    return matched


def build_table(entries: list[ScriptEntry], names_only: bool = False) -> Table:
    """Build an aligned table with a header row and separator rule."""
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Script", style="cyan", no_wrap=True)
    if not names_only:
        table.add_column("Command", min_width=20, no_wrap=True)

    for entry in entries:
        # Text avoids rich markup parsing of commands like "[ -f x ]"
        if names_only:
            table.add_row(Text(entry.name))
        else:
            table.add_row(Text(entry.name), Text(entry.command))

    return table


def format_count(count: int) -> str:
    noun = "script" if count == 1 else "scripts"
    return f"Found {count} {noun}"


def format_list_output(entries: list[ScriptEntry], names_only: bool = False) -> str:
    """Format one line per script."""
    if names_only:
        return "\n".join(entry.name for entry in entries)
    return "\n".join(f"{entry.name}: {entry.command}" for entry in entries)


def format_json_output(entries: list[ScriptEntry], names_only: bool = False) -> str:
    """Format JSON output."""
    if names_only:
        return json.dumps([entry.name for entry in entries], indent=2)
    return json.dumps({entry.name: entry.command for entry in entries}, indent=2)
