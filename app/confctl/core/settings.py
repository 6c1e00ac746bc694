"""confctl settings.

Settings are stored in ~/.config/confctl/settings.toml:

    active_directory = "/srv/site/config/active"
    editor = "nvim"

    [directories]
    sync = "/srv/site/config/sync"
    staging = "/srv/site/config/staging"

    [overrides."system.site"]
    name = "Development copy"

Directory labels name the storages that export, import, and the
--source option of config-get can use. Overrides are applied on read
when config-get is called with --include-overridden.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from confctl.core.paths import (
    ACTIVE_LABEL,
    SYNC_LABEL,
    get_default_active_dir,
    get_default_sync_dir,
    get_settings_path,
)

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Settings for confctl.

    Attributes:
        active_directory: Directory of the active storage. None uses the
            XDG state directory.
        directories: Extra storage directories keyed by label.
        overrides: Override values keyed by configuration object name.
        editor: Editor command for config-edit. None uses $VISUAL/$EDITOR.
    """

    model_config = ConfigDict(extra="forbid")

    active_directory: Annotated[
        Path | None,
        Field(description="Directory of the active configuration storage"),
    ] = None
    directories: Annotated[
        dict[str, Path],
        Field(default_factory=dict, description="Labelled storage directories"),
    ]
    overrides: Annotated[
        dict[str, dict[str, Any]],
        Field(default_factory=dict, description="Override values per config object"),
    ]
    editor: Annotated[str | None, Field(description="Editor command")] = None

    @property
    def active_path(self) -> Path:
        """Directory of the active storage."""
        return (self.active_directory or get_default_active_dir()).expanduser()

    def get_directory(self, label: str) -> Path | None:
        """Get the directory for a label.

        The "active" label always resolves to the active storage and the
        "sync" label falls back to the XDG state directory.

        Args:
            label: Directory label.

        Returns:
            The directory, or None if the label is unknown.
        """
        if label == ACTIVE_LABEL:
            return self.active_path
        if label in self.directories:
            return self.directories[label].expanduser()
        if label == SYNC_LABEL:
            return get_default_sync_dir()
        return None

    def resolve_directory(self, label_or_path: str) -> Path:
        """Resolve a label, falling back to treating the value as a path.

        Args:
            label_or_path: Directory label or filesystem path.

        Returns:
            Directory path.
        """
        directory = self.get_directory(label_or_path)
        if directory is not None:
            return directory
        return Path(label_or_path).expanduser()


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: default settings are returned.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or its content is invalid.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e
