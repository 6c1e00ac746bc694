"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from typing import Any

import pytest
from confctl.storage.file import FileStorage
from confctl.storage.memory import MemoryStorage


@pytest.fixture
def site_config() -> dict[str, Any]:
    """Sample system.site configuration object."""
    return {
        "name": "Example",
        "mail": "admin@example.com",
        "page": {"front": "/node", "403": "", "404": ""},
    }


@pytest.fixture
def memory_storage(site_config: dict[str, Any]) -> MemoryStorage:
    """Memory storage with two default objects and one French translation."""
    storage = MemoryStorage()
    storage.write("system.site", site_config)
    storage.write("system.performance", {"cache": {"page": {"max_age": 0}}})
    storage.create_collection("language.fr").write("system.site", {"name": "Exemple"})
    return storage


@pytest.fixture
def xdg_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and state directories into a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    return tmp_path


@pytest.fixture
def active_storage(xdg_dirs: Path, site_config: dict[str, Any]) -> FileStorage:
    """File storage at the default active directory, pre-filled."""
    storage = FileStorage(xdg_dirs / "state" / "confctl" / "active")
    storage.write("system.site", site_config)
    storage.write("system.performance", {"cache": {"page": {"max_age": 0}}})
    return storage


@pytest.fixture
def sync_storage(xdg_dirs: Path) -> FileStorage:
    """Empty file storage at the default sync directory."""
    return FileStorage(xdg_dirs / "state" / "confctl" / "sync")
