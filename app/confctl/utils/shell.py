"""Shell execution utilities.

Provides interactive subprocess execution for launching an editor.
"""

import os
import shlex
import shutil
import subprocess

# Editor used when neither settings nor environment name one
DEFAULT_EDITOR = "vi"


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def get_editor(configured: str | None = None) -> list[str]:
    """Resolve the editor command line.

    Args:
        configured: Editor from settings, which wins over the environment.

    Returns:
        Editor command split into arguments ($VISUAL, then $EDITOR, then vi).
    """
    editor = configured or os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR
    return shlex.split(editor)


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    The subprocess talks to the user's terminal directly; nothing is
    captured.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(  # nosec: B603
        args,
        check=False,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode
