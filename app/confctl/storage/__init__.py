"""Configuration storage backends.

This module exports the Storage interface and its implementations.
"""

from confctl.storage.base import DEFAULT_COLLECTION, Storage, StorageError
from confctl.storage.file import FileStorage
from confctl.storage.memory import MemoryStorage

__all__ = [
    "DEFAULT_COLLECTION",
    "FileStorage",
    "MemoryStorage",
    "Storage",
    "StorageError",
]
