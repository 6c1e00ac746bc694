"""Shared Rich display functions for config changes.

Renders change sets (see core.changes) as tables for the edit, import,
and export commands.
"""

import os
import sys

from rich.table import Table
from rich.text import Text

from confctl.core.changes import (
    CHANGE_STYLES,
    CHANGES_HEADER,
    ChangeSet,
    build_change_rows,
    count_changes,
)
from confctl.utils.formatting import console


def config_changes_table_format(changes: ChangeSet, use_color: bool = False) -> Table:
    """Create a Rich table listing config changes.

    Builds a table with Collection, Config, and Operation columns and one
    row per changed config. When use_color is set, the operation cell is
    styled delete (red), update (yellow), or create (green); other
    operations are left plain.

    Args:
        changes: Change set keyed by collection.
        use_color: Whether to style the table.

    Returns:
        Rich Table configured for change display.
    """
    table = Table(
        show_header=True,
        header_style="bold_header" if use_color else None,
        border_style="border" if use_color else None,
    )
    for heading in CHANGES_HEADER:
        table.add_column(heading, no_wrap=True)

    for row in build_change_rows(changes, use_color=use_color):
        operation = Text(row.operation, style=row.style) if row.style else row.operation
        table.add_row(row.collection, row.config, operation)

    return table


def config_changes_table_print(changes: ChangeSet, use_color: bool | None = None) -> Table:
    """Print a table of config changes to standard output.

    The table is rendered through the shared console, line endings are
    normalized on non-Windows platforms, and trailing whitespace is
    stripped before writing.

    Args:
        changes: Change set keyed by collection.
        use_color: Whether to style the table. None uses color unless the
            console has color disabled.

    Returns:
        The table that was printed.
    """
    if use_color is None:
        use_color = not console.no_color

    table = config_changes_table_format(changes, use_color=use_color)
    with console.capture() as capture:
        console.print(table)
    output = capture.get()

    if not sys.platform.startswith("win"):
        output = output.replace("\r\n", os.linesep)

    console.file.write(output.rstrip() + "\n")
    console.file.flush()
    return table


def print_changes_summary(changes: ChangeSet, use_color: bool = True) -> None:
    """Print counts of deletions, updates, and creations.

    If the change set is empty, produces no output.

    Args:
        changes: Change set keyed by collection.
        use_color: Whether to style the counts.
    """
    counts = {"create": 0, "update": 0, "delete": 0}
    for per_type in changes.values():
        for change, names in per_type.items():
            if change in counts:
                counts[change] += len(names)

    parts: list[str] = []
    for change in ("create", "update", "delete"):
        if not counts[change]:
            continue
        text = f"{counts[change]} to {change}"
        parts.append(f"[{CHANGE_STYLES[change]}]{text}[/]" if use_color else text)

    if parts:
        console.print(f"\nSummary: {', '.join(parts)} ({count_changes(changes)} total)")
