"""Utility modules for confctl.

This module exports commonly used utility functions.
"""

from confctl.utils.formatting import (
    console,
    err_console,
    format_yaml,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from confctl.utils.shell import command_exists, get_editor, run_interactive

__all__ = [
    "command_exists",
    "console",
    "err_console",
    "format_yaml",
    "get_editor",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_interactive",
]
