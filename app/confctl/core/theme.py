"""Color theme for confctl output.

The bundled data/theme.toml holds the default colors. Any subset of
them can be replaced in ~/.config/confctl/theme.toml:

    [colors]
    change_delete = "#ff0000"

Colors are turned into named Rich styles. The config changes table uses
change.delete, change.update, and change.create.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from confctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

# Rich style name -> (ThemeColors field, bold)
STYLE_MAP: dict[str, tuple[str, bool]] = {
    "text": ("text", False),
    "muted": ("muted", False),
    "header": ("header", False),
    "bold_header": ("header", True),
    "border": ("border", False),
    "success": ("success", False),
    "warning": ("warning", False),
    "error": ("error", True),
    "info": ("info", False),
    "change.delete": ("change_delete", True),
    "change.update": ("change_update", True),
    "change.create": ("change_create", True),
    "config.name": ("config_name", True),
    "config.key": ("config_key", False),
}


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by confctl."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Config changes table
    change_delete: str = "#f53263"
    change_update: str = "#f5d832"
    change_create: str = "#03b971"

    config_name: str = "#69B9A1"
    config_key: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not HEX_COLOR.match(value.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return value.strip()


def get_bundled_theme_path() -> Path:
    """Path of the theme.toml shipped with the package."""
    return Path(str(resources.files("confctl.data").joinpath("theme.toml")))


def _read_colors(path: Path) -> dict[str, str]:
    """Read the [colors] table of a theme file.

    Unreadable or malformed files are logged and treated as empty.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors with the user's overrides on top.

    Args:
        user_path: User theme file. None uses ~/.config/confctl/theme.toml.

    Returns:
        Validated colors. Invalid user colors fall back to the defaults.
    """
    colors = _read_colors(get_bundled_theme_path())
    overrides = _read_colors(user_path or get_user_theme_path())
    if overrides:
        logger.debug("Applying %d user theme color(s)", len(overrides))

    try:
        return ThemeColors(**{**colors, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme from colors (loaded if not given)."""
    colors = colors or load_theme()
    styles: dict[str, str] = {}
    for style, (field, bold) in STYLE_MAP.items():
        color = getattr(colors, field)
        styles[style] = f"bold {color}" if bold else color
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
