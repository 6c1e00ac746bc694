"""Configuration object handles and the factory that creates them.

A Config handle wraps one named configuration object read from a
storage. Handles returned by ConfigFactory.get() are read-only; handles
returned by ConfigFactory.get_editable() can be changed and saved.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from confctl.utils.nested import deep_merge, get_nested, set_nested, unset_nested

if TYPE_CHECKING:
    from confctl.storage.base import Storage

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when a configuration object does not exist."""


class ConfigKeyNotFoundError(ConfigError):
    """Raised when a key is missing from a configuration object."""


class MissingValueError(ConfigError):
    """Raised when no value is supplied for a set operation."""


class ImmutableConfigError(ConfigError):
    """Raised when a read-only configuration handle is modified."""


class Config:
    """Handle for a single named configuration object.

    Reads see the stored data merged with any overrides attached to the
    handle. Writes change the raw data only, so overrides never end up
    in storage.

    Attributes:
        name: Dotted configuration object name (e.g., "system.site").
    """

    def __init__(
        self,
        name: str,
        storage: Storage,
        data: dict[str, Any] | None = None,
        overrides: dict[str, Any] | None = None,
        editable: bool = False,
    ) -> None:
        self.name = name
        self._storage = storage
        self._is_new = data is None
        self._data: dict[str, Any] = data if data is not None else {}
        self._overrides = overrides or {}
        self._editable = editable

    def get(self, key: str = "") -> Any:
        """Read a value.

        Args:
            key: Dotted key path. Empty returns the whole object.

        Returns:
            The value (with overrides applied), or None if absent.
        """
        data = deep_merge(self._data, self._overrides) if self._overrides else self._data
        return copy.deepcopy(get_nested(data, key))

    def get_raw_data(self) -> dict[str, Any]:
        """Return the stored data without overrides."""
        return copy.deepcopy(self._data)

    def has_overrides(self) -> bool:
        """Check if override values are attached to this handle."""
        return bool(self._overrides)

    def set(self, key: str, value: Any) -> Config:
        """Assign a value at a dotted key."""
        self._check_editable()
        set_nested(self._data, key, value)
        return self

    def set_data(self, data: dict[str, Any]) -> Config:
        """Replace the whole object."""
        self._check_editable()
        self._data = copy.deepcopy(data)
        return self

    def clear(self, key: str) -> Config:
        """Remove a dotted key. Missing keys are ignored."""
        self._check_editable()
        unset_nested(self._data, key)
        return self

    def save(self) -> Config:
        """Write the object to storage."""
        self._check_editable()
        self._storage.write(self.name, self._data)
        self._is_new = False
        logger.info("Saved config %s", self.name)
        return self

    def delete(self) -> Config:
        """Delete the object from storage."""
        self._check_editable()
        self._storage.delete(self.name)
        self._data = {}
        self._is_new = True
        logger.info("Deleted config %s", self.name)
        return self

    def is_new(self) -> bool:
        """Check if the object does not exist in storage yet."""
        return self._is_new

    def get_storage(self) -> Storage:
        """Return the storage this object is read from and saved to."""
        return self._storage

    def _check_editable(self) -> None:
        if not self._editable:
            msg = f"Config {self.name} is read-only"
            raise ImmutableConfigError(msg)


class ConfigFactory:
    """Creates Config handles backed by a single storage.

    Example:
        >>> factory = ConfigFactory(storage, overrides={"system.site": {"name": "Dev"}})
        >>> factory.get("system.site").get("name")
        'Example'
        >>> factory.get_editable("system.site").get("name")
        'Dev'
    """

    def __init__(
        self,
        storage: Storage,
        overrides: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            storage: Storage holding the configuration objects.
            overrides: Override values keyed by object name.
        """
        self.storage = storage
        self.overrides = overrides or {}

    def get(self, name: str) -> Config:
        """Return a read-only handle without overrides."""
        return Config(name, self.storage, self.storage.read(name))

    def get_editable(self, name: str) -> Config:
        """Return an editable handle that applies overrides on read."""
        return Config(
            name,
            self.storage,
            self.storage.read(name),
            overrides=self.overrides.get(name),
            editable=True,
        )

    def list_all(self, prefix: str = "") -> list[str]:
        """List configuration object names in the storage."""
        return self.storage.list_all(prefix)
