"""XDG-compliant path management for confctl.

This module provides standardized paths following the XDG Base Directory
Specification for settings and stored configuration.

XDG defaults:
- Config: ~/.config/confctl/
- State: ~/.local/state/confctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "confctl"

# Label of the live configuration storage
ACTIVE_LABEL = "active"

# Label of the default export/import directory
SYNC_LABEL = "sync"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/confctl/ (or XDG_CONFIG_HOME/confctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    Stored configuration objects live here unless the settings file
    points elsewhere.

    Returns:
        Path to ~/.local/state/confctl/ (or XDG_STATE_HOME/confctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/confctl/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/confctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_active_dir() -> Path:
    """Get the default active storage directory.

    Returns:
        Path to ~/.local/state/confctl/active/.
    """
    return get_state_dir() / ACTIVE_LABEL


def get_default_sync_dir() -> Path:
    """Get the default sync directory used by export and import.

    Returns:
        Path to ~/.local/state/confctl/sync/.
    """
    return get_state_dir() / SYNC_LABEL
