"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from confctl.core.paths import (
    APP_NAME,
    get_config_dir,
    get_default_active_dir,
    get_default_sync_dir,
    get_settings_path,
    get_state_dir,
    get_user_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_uses_default(self) -> None:
        """An empty XDG_CONFIG_HOME is treated as unset."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestGetStateDir:
    """Tests for get_state_dir function."""

    def test_default_state_dir(self) -> None:
        """get_state_dir returns default path when XDG_STATE_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_state_dir()
            expected = Path.home() / ".local" / "state" / APP_NAME

        assert result == expected

    def test_respects_xdg_state_home(self, tmp_path: Path) -> None:
        """get_state_dir respects XDG_STATE_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path)}):
            result = get_state_dir()

        assert result == tmp_path / APP_NAME


class TestFilePaths:
    """Tests for file and storage directory paths."""

    def test_settings_and_theme_live_in_config_dir(self, tmp_path: Path) -> None:
        """Settings and theme files are under the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_settings_path() == tmp_path / APP_NAME / "settings.toml"
            assert get_user_theme_path() == tmp_path / APP_NAME / "theme.toml"

    def test_storages_live_in_state_dir(self, tmp_path: Path) -> None:
        """Active and sync storages are under the state directory."""
        with patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path)}):
            assert get_default_active_dir() == tmp_path / APP_NAME / "active"
            assert get_default_sync_dir() == tmp_path / APP_NAME / "sync"
