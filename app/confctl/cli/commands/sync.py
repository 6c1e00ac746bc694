"""Export and import commands.

Copies configuration between the active storage and a labelled
directory, showing the config changes table before anything is written.
"""

from typing import Annotated

import typer

from confctl.cli.display import config_changes_table_print, print_changes_summary
from confctl.cli.types import (
    choose_directory_label,
    confirm_or_abort,
    get_settings,
    get_storage,
    is_quiet,
    use_color,
)
from confctl.core.changes import is_empty
from confctl.core.paths import ACTIVE_LABEL
from confctl.core.sync import compute_changes, copy_config, import_changes
from confctl.storage.base import StorageError
from confctl.utils.formatting import print_error, print_info, print_success


def export_config(
    ctx: typer.Context,
    destination: Annotated[
        str | None,
        typer.Option(
            "--destination",
            "-d",
            help="Directory label from settings, or a path. Asked for when several labels exist.",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    simulate: Annotated[
        bool,
        typer.Option("--simulate", help="Show what would change without writing."),
    ] = False,
) -> None:
    """Export the active configuration to a directory.

    Every object in every collection is copied. Objects that only exist
    in the destination are left in place.

    Examples:
        confctl config-export                       # To the sync directory
        confctl config-export -d staging --yes      # To a labelled directory
    """
    settings = get_settings(ctx)
    destination = destination or choose_directory_label(settings, "destination")
    if settings.resolve_directory(destination) == settings.active_path:
        print_error("Destination is the active storage.")
        raise typer.Exit(code=1)

    active = get_storage(ctx, ACTIVE_LABEL)
    target = get_storage(ctx, destination)

    try:
        changes = compute_changes(active, target, partial=True)
        if is_empty(changes):
            print_info("There are no changes to export.")
            return

        config_changes_table_print(changes, use_color=use_color(ctx))
        print_changes_summary(changes, use_color=use_color(ctx))

        if simulate:
            print_info("Simulated: nothing was exported.")
            return

        confirm_or_abort(f"\nExport configuration to {target.directory}?", yes)
        copied = copy_config(active, target)
    except StorageError as e:
        print_error(f"Export failed: {e}")
        raise typer.Exit(code=1) from e

    if not is_quiet(ctx):
        print_success(f"Exported {copied} config object(s) to {target.directory}.")


def import_config(
    ctx: typer.Context,
    source: Annotated[
        str | None,
        typer.Option(
            "--source",
            "-s",
            help="Directory label from settings, or a path. Asked for when several labels exist.",
        ),
    ] = None,
    partial: Annotated[
        bool,
        typer.Option(
            "--partial",
            help="Do not delete active objects missing from the source.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    simulate: Annotated[
        bool,
        typer.Option("--simulate", help="Show what would change without writing."),
    ] = False,
) -> None:
    """Import configuration from a directory into the active storage.

    Examples:
        confctl config-import                      # From the sync directory
        confctl config-import -s staging --partial
    """
    settings = get_settings(ctx)
    source = source or choose_directory_label(settings, "source")
    source_dir = settings.resolve_directory(source)
    if not source_dir.is_dir():
        print_error(f"Source directory not found: {source_dir}")
        raise typer.Exit(code=1)
    if source_dir == settings.active_path:
        print_error("Source is the active storage.")
        raise typer.Exit(code=1)

    incoming = get_storage(ctx, source)
    active = get_storage(ctx, ACTIVE_LABEL)

    try:
        changes = compute_changes(incoming, active, partial=partial)
        if is_empty(changes):
            print_info("There are no changes to import.")
            return

        config_changes_table_print(changes, use_color=use_color(ctx))
        print_changes_summary(changes, use_color=use_color(ctx))

        if simulate:
            print_info("Simulated: nothing was imported.")
            return

        confirm_or_abort("\nImport the listed configuration changes?", yes)
        applied = import_changes(incoming, active, changes)
    except StorageError as e:
        print_error(f"Import failed: {e}")
        raise typer.Exit(code=1) from e

    if not is_quiet(ctx):
        print_success(f"Imported {applied} config change(s).")
