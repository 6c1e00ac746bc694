"""Abstract base class for configuration storages.

This module defines the Storage interface that every configuration
backend must implement, along with the collection constants.
"""

from abc import ABC, abstractmethod
from typing import Any

# Name of the collection every storage starts positioned on
DEFAULT_COLLECTION = ""


class StorageError(Exception):
    """Raised when a storage backend cannot read or write data."""


class Storage(ABC):
    """Abstract base class for all configuration storages.

    A storage holds named configuration objects, partitioned into
    collections. Each Storage instance is positioned on exactly one
    collection; create_collection() returns a sibling view on the same
    backing store positioned on another collection.

    Example:
        >>> storage = MemoryStorage()
        >>> storage.write("system.site", {"name": "Example"})
        >>> french = storage.create_collection("language.fr")
        >>> french.write("system.site", {"name": "Exemple"})
        >>> storage.get_all_collection_names()
        ['language.fr']
    """

    def __init__(self, collection: str = DEFAULT_COLLECTION) -> None:
        """Initialize the storage view.

        Args:
            collection: Collection this view reads from and writes to.
        """
        self._collection = collection

    def get_collection_name(self) -> str:
        """Return the collection this storage is positioned on."""
        return self._collection

    @abstractmethod
    def read(self, name: str) -> dict[str, Any] | None:
        """Read a configuration object.

        Args:
            name: Dotted configuration object name.

        Returns:
            The object data, or None if it does not exist.

        Raises:
            StorageError: If the backend cannot be read.
        """

    @abstractmethod
    def write(self, name: str, data: dict[str, Any]) -> None:
        """Write a configuration object, replacing any existing data.

        Args:
            name: Dotted configuration object name.
            data: Object data to store.

        Raises:
            StorageError: If the backend cannot be written.
        """

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Delete a configuration object.

        Args:
            name: Dotted configuration object name.

        Returns:
            True if the object existed and was deleted, False otherwise.
        """

    @abstractmethod
    def list_all(self, prefix: str = "") -> list[str]:
        """List object names in this collection.

        Args:
            prefix: Only return names starting with this prefix.

        Returns:
            Sorted list of object names.
        """

    @abstractmethod
    def create_collection(self, collection: str) -> "Storage":
        """Return a storage positioned on another collection.

        Args:
            collection: Collection name (DEFAULT_COLLECTION for the default).

        Returns:
            Storage sharing this storage's backing store.
        """

    @abstractmethod
    def get_all_collection_names(self) -> list[str]:
        """List every named collection that holds data.

        The default collection is never included.

        Returns:
            Sorted list of collection names.
        """

    def exists(self, name: str) -> bool:
        """Check if a configuration object exists in this collection."""
        return name in self.list_all()

    def read_multiple(self, names: list[str]) -> dict[str, dict[str, Any]]:
        """Read several objects at once, skipping missing ones.

        Args:
            names: Object names to read.

        Returns:
            Mapping of name to data for each object that exists.
        """
        result: dict[str, dict[str, Any]] = {}
        for name in names:
            data = self.read(name)
            if data is not None:
                result[name] = data
        return result
