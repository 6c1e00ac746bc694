"""Main CLI application entry point.

Defines the Typer application, global options, and command names.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from confctl import __version__
from confctl.cli.commands import config, sync

# Create main Typer app
app = typer.Typer(
    name="confctl",
    help="Read, change, and migrate stored configuration objects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"confctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colored output.",
        ),
    ] = False,
    settings_path: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            help="Settings file to use instead of ~/.config/confctl/settings.toml.",
        ),
    ] = None,
) -> None:
    """confctl - Read, change, and migrate stored configuration objects.

    Configuration objects are named YAML documents such as "system.site",
    kept in an active storage directory and optional labelled directories.
    """
    # Store options in context for commands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["no_color"] = no_color
    ctx.obj["settings_path"] = settings_path

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands, each with its short alias
COMMANDS = (
    ("config-get", "cget", config.get),
    ("config-set", "cset", config.set_value),
    ("config-edit", "cedit", config.edit),
    ("config-delete", "cdel", config.delete),
    ("config-export", "cex", sync.export_config),
    ("config-import", "cim", sync.import_config),
)

for _name, _alias, _command in COMMANDS:
    app.command(name=_name)(_command)
    app.command(name=_alias, hidden=True)(_command)


if __name__ == "__main__":
    app()
