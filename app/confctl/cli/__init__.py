"""CLI package for confctl.

This package contains the Typer application and all commands.
"""

from confctl.cli.main import app

__all__ = ["app"]
