"""Single-object config commands.

Provides config-get, config-set, config-edit, and config-delete, which
read or change one configuration object in the active storage.
"""

import json
import tempfile
from pathlib import Path
from typing import Annotated, Any

import typer

from confctl.cli.display import config_changes_table_print, print_changes_summary
from confctl.cli.types import (
    OutputFormat,
    choose_config_name,
    confirm_or_abort,
    get_config_factory,
    get_settings,
    is_quiet,
    require_config,
    use_color,
)
from confctl.core.changes import is_empty
from confctl.core.config import ConfigError
from confctl.core.operations import (
    SetAction,
    ValueFormat,
    apply_set,
    delete_config,
    get_config_value,
    plan_set,
)
from confctl.core.paths import ACTIVE_LABEL
from confctl.core.sync import compute_changes, import_changes
from confctl.storage.base import StorageError
from confctl.storage.file import FileStorage
from confctl.utils.formatting import (
    console,
    format_yaml,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from confctl.utils.shell import command_exists, get_editor, run_interactive


def get(
    ctx: typer.Context,
    config_name: Annotated[
        str | None,
        typer.Argument(help='The config object name, for example "system.site".'),
    ] = None,
    key: Annotated[
        str,
        typer.Argument(help='The config key, for example "page.front".'),
    ] = "",
    source: Annotated[
        str,
        typer.Option(
            "--source",
            help="The config storage source to read (a directory label or path).",
        ),
    ] = ACTIVE_LABEL,
    include_overridden: Annotated[
        bool,
        typer.Option(
            "--include-overridden",
            help="Apply overrides from settings to values.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.YAML,
) -> None:
    """Display a config value, or a whole configuration object.

    Examples:
        confctl config-get system.site              # Whole object
        confctl config-get system.site page.front   # A single key
    """
    factory = get_config_factory(ctx, source)
    config_name = choose_config_name(factory, config_name)
    require_config(factory, config_name)

    if include_overridden and source != ACTIVE_LABEL:
        print_warning("Overrides only apply to the active storage; ignoring --include-overridden.")
        include_overridden = False

    try:
        value = get_config_value(factory, config_name, key, include_overridden)
    except StorageError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if key and output_format == OutputFormat.STRING:
        value = value[f"{config_name}:{key}"]

    _print_value(value, output_format)


def set_value(
    ctx: typer.Context,
    config_name: Annotated[
        str,
        typer.Argument(help='The config object name, for example "system.site".'),
    ],
    key: Annotated[
        str,
        typer.Argument(help='The config key, for example "page.front".'),
    ],
    value: Annotated[
        str | None,
        typer.Argument(help="The value to assign to the config key. Use '-' to read from STDIN."),
    ] = None,
    value_format: Annotated[
        ValueFormat,
        typer.Option(
            "--format",
            "-f",
            help='Format to parse the value. Use "string" (default) or "yaml".',
            case_sensitive=False,
        ),
    ] = ValueFormat.STRING,
    option_value: Annotated[
        str | None,
        typer.Option("--value", hidden=True, help="The value to assign to the config key."),
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
    """Set config value directly. Does not perform a config import.

    Only the one question that fits is asked (create object, create key, or
    update key); declining it aborts without asking the others.

    Examples:
        confctl config-set system.site page.front node
        confctl config-set system.site page.front "[node, user]" --format yaml
    """
    factory = get_config_factory(ctx)
    require_config(factory, config_name)

    try:
        plan = plan_set(
            factory,
            config_name,
            key,
            value,
            option_value=option_value,
            value_format=value_format,
        )
    except (ConfigError, StorageError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if (
        plan.action == SetAction.BULK_UPDATE
        and not yes
        and not typer.confirm(plan.question, default=False)
    ):
        plan = plan.without_bulk()

    if plan.action != SetAction.BULK_UPDATE:
        confirm_or_abort(plan.question, yes)

    try:
        result = apply_set(plan, simulate=simulate)
    except (ConfigError, StorageError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if result.simulated:
        print_info(f"Simulated: {config_name}:{key} was not changed.")
    elif not is_quiet(ctx):
        print_success(f"Saved {config_name} config.")


def edit(
    ctx: typer.Context,
    config_name: Annotated[
        str | None,
        typer.Argument(help='The config object name, for example "system.site".'),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Import edits without confirmation."),
    ] = False,
) -> None:
    """Open a config object in a text editor. Edits are imported after closing the editor.

    The editor is taken from settings, then $VISUAL, then $EDITOR.

    Examples:
        confctl config-edit image.style.large
        confctl config-edit                      # Choose from a list
    """
    factory = get_config_factory(ctx)
    config_name = choose_config_name(factory, config_name)
    require_config(factory, config_name)

    editor = get_editor(get_settings(ctx).editor)
    if not command_exists(editor[0]):
        print_error(f"Editor not found: {editor[0]}")
        print_info("Set $EDITOR or $VISUAL, or 'editor' in settings.toml.")
        raise typer.Exit(code=1)

    active = factory.get(config_name).get_storage()

    with tempfile.TemporaryDirectory(prefix="confctl-edit-") as temp_dir:
        temp_storage = FileStorage(Path(temp_dir))
        try:
            temp_storage.write(config_name, active.read(config_name) or {})
        except StorageError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

        returncode = run_interactive([*editor, str(temp_storage.get_file_path(config_name))])
        if returncode != 0:
            print_error(f"Editor exited with code {returncode}; nothing imported.")
            raise typer.Exit(code=1)

        try:
            changes = compute_changes(temp_storage, active, partial=True)
        except StorageError as e:
            print_error(f"Edited config could not be read: {e}")
            raise typer.Exit(code=1) from e

        if is_empty(changes):
            print_info("There are no changes to import.")
            return

        config_changes_table_print(changes, use_color=use_color(ctx))
        print_changes_summary(changes, use_color=use_color(ctx))
        confirm_or_abort("\nImport the changes?", yes)

        try:
            import_changes(temp_storage, active, changes)
        except StorageError as e:
            print_error(f"Import failed: {e}")
            raise typer.Exit(code=1) from e

    if not is_quiet(ctx):
        print_success(f"Imported changes to {config_name}.")


def delete(
    ctx: typer.Context,
    config_name: Annotated[
        str | None,
        typer.Argument(help='The config object name, for example "system.site".'),
    ] = None,
    key: Annotated[
        str | None,
        typer.Argument(help='A config key to clear, for example "page.front".'),
    ] = None,
) -> None:
    """Delete a configuration key, or a whole object.

    Examples:
        confctl config-delete system.site              # Delete the object
        confctl config-delete system.site page.front   # Clear one key
    """
    factory = get_config_factory(ctx)
    config_name = choose_config_name(factory, config_name)
    require_config(factory, config_name)

    try:
        delete_config(factory, config_name, key)
    except (ConfigError, StorageError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if is_quiet(ctx):
        return
    if key:
        print_success(f"Deleted {config_name}:{key}.")
    else:
        print_success(f"Deleted {config_name} config.")


# === Private helper functions ===


def _print_value(value: Any, output_format: OutputFormat) -> None:
    """Print a config value in the requested format."""
    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(value, default=str))
        return
    if output_format == OutputFormat.STRING and not isinstance(value, dict | list):
        typer.echo("" if value is None else str(value))
        return
    typer.echo(format_yaml(value))
