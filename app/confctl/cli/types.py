"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules: settings and storage resolution from the
Typer context, config name prompting, and error reporting.
"""

from enum import Enum
from pathlib import Path

import typer

from confctl.core.config import ConfigError, ConfigFactory
from confctl.core.operations import validate_config_name
from confctl.core.paths import ACTIVE_LABEL, SYNC_LABEL
from confctl.core.settings import Settings, SettingsError, load_settings
from confctl.storage.base import StorageError
from confctl.storage.file import FileStorage
from confctl.utils.formatting import console, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options for config-get."""

    YAML = "yaml"
    JSON = "json"
    STRING = "string"


def get_settings(ctx: typer.Context) -> Settings:
    """Load settings once per invocation and cache them on the context.

    Raises:
        typer.Exit: If the settings file cannot be loaded.
    """
    obj = ctx.ensure_object(dict)
    settings = obj.get("settings")
    if isinstance(settings, Settings):
        return settings

    settings_path: Path | None = obj.get("settings_path")
    try:
        settings = load_settings(settings_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    obj["settings"] = settings
    return settings


def get_storage(ctx: typer.Context, label: str = ACTIVE_LABEL) -> FileStorage:
    """Get the file storage for a directory label or path."""
    return FileStorage(get_settings(ctx).resolve_directory(label))


def get_config_factory(ctx: typer.Context, label: str = ACTIVE_LABEL) -> ConfigFactory:
    """Build the config factory for a storage.

    Overrides from settings only apply to the active storage.
    """
    settings = get_settings(ctx)
    overrides = settings.overrides if label == ACTIVE_LABEL else {}
    return ConfigFactory(get_storage(ctx, label), overrides=overrides)


def is_quiet(ctx: typer.Context) -> bool:
    """Check if non-essential output is suppressed."""
    return bool(ctx.ensure_object(dict).get("quiet", False))


def use_color(ctx: typer.Context) -> bool:
    """Check if colored output is enabled."""
    return not ctx.ensure_object(dict).get("no_color", False) and not console.no_color


def choose_config_name(factory: ConfigFactory, name: str | None) -> str:
    """Return name, or ask the user to pick one when it is missing.

    Args:
        factory: Factory used to list available configuration objects.
        name: Name given on the command line, if any.

    Returns:
        The configuration object name.

    Raises:
        typer.Exit: If there is nothing to choose from or the choice is invalid.
    """
    if name:
        return name

    names = factory.list_all()
    if not names:
        print_error("No configuration objects found.")
        raise typer.Exit(code=1)

    return _choose("Choose a configuration", names)


def choose_directory_label(settings: Settings, option_name: str) -> str:
    """Ask which labelled directory to use when there is more than one.

    The candidates are the labels from settings plus "sync", never
    "active". With fewer than two candidates no question is asked.

    Args:
        settings: Loaded settings.
        option_name: "source" or "destination", used in the question.

    Returns:
        The chosen label, or "sync".

    Raises:
        typer.Exit: If the choice is invalid.
    """
    labels = sorted({*settings.directories, SYNC_LABEL} - {ACTIVE_LABEL})
    if len(labels) < 2:
        return SYNC_LABEL
    return _choose(f"Choose a {option_name}.", labels)


def require_config(factory: ConfigFactory, name: str) -> None:
    """Validate that a config object exists or exit with an error.

    Raises:
        typer.Exit: If the object does not exist.
    """
    try:
        validate_config_name(factory, name)
    except (ConfigError, StorageError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def confirm_or_abort(question: str, yes: bool) -> None:
    """Ask a yes/no question unless --yes was given.

    Raises:
        typer.Exit: With code 0 if the user declines.
    """
    if yes:
        return
    if not typer.confirm(question, default=False):
        print_info("Aborted.")
        raise typer.Exit(code=0)


def _choose(title: str, items: list[str]) -> str:
    """Print a numbered list and return the item the user picks."""
    console.print(f"[bold_header]{title}[/bold_header]")
    for index, item in enumerate(items, start=1):
        console.print(f"  [muted]{index:>3}[/muted]  {item}")

    choice = typer.prompt("Choice", type=int)
    if not 1 <= choice <= len(items):
        print_error(f"Invalid choice: {choice}")
        raise typer.Exit(code=1)
    return items[choice - 1]
