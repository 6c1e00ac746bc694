"""CLI commands for confctl.

This package contains all command implementations.
"""

from confctl.cli.commands import config, sync

__all__ = ["config", "sync"]
