"""YAML file-backed configuration storage.

Each configuration object is stored as one YAML file named after the
object. Named collections live in sub-directories derived from the
collection name, so collection "language.fr" maps to "language/fr/".
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import yaml

from confctl.storage.base import DEFAULT_COLLECTION, Storage, StorageError

logger = logging.getLogger(__name__)

# File extension for stored configuration objects
FILE_EXTENSION = ".yml"


def encode(data: dict[str, Any]) -> str:
    """Serialize a configuration object to YAML text."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def decode(text: str) -> dict[str, Any]:
    """Parse YAML text into a configuration object.

    Raises:
        StorageError: If the text is not valid YAML or not a mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise StorageError(f"Invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise StorageError(f"Expected a mapping, got {type(data).__name__}")
    return data


class FileStorage(Storage):
    """Storage that keeps configuration objects as YAML files.

    Attributes:
        directory: Root directory of the storage (default collection).
    """

    def __init__(self, directory: Path, collection: str = DEFAULT_COLLECTION) -> None:
        super().__init__(collection)
        self.directory = Path(directory)

    def _collection_path(self) -> Path:
        if self._collection == DEFAULT_COLLECTION:
            return self.directory
        return self.directory.joinpath(*self._collection.split("."))

    def get_file_path(self, name: str) -> Path:
        """Return the file path used for a configuration object.

        Args:
            name: Dotted configuration object name.

        Returns:
            Path to the YAML file in this collection.
        """
        return self._collection_path() / f"{name}{FILE_EXTENSION}"

    def exists(self, name: str) -> bool:
        return self.get_file_path(name).is_file()

    def read(self, name: str) -> dict[str, Any] | None:
        path = self.get_file_path(name)
        if not path.is_file():
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e
        try:
            return decode(text)
        except StorageError as e:
            raise StorageError(f"Failed to parse {path}: {e}") from e

    def write(self, name: str, data: dict[str, Any]) -> None:
        path = self.get_file_path(name)
        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Write atomically using a temporary file in the same directory
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(encode(data))
            os.replace(str(tmp_path), str(path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)

    def delete(self, name: str) -> bool:
        path = self.get_file_path(name)
        if not path.is_file():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}") from e
        logger.debug("Deleted %s", path)
        return True

    def list_all(self, prefix: str = "") -> list[str]:
        folder = self._collection_path()
        if not folder.is_dir():
            return []
        names = [
            entry.name[: -len(FILE_EXTENSION)]
            for entry in folder.iterdir()
            if entry.is_file() and entry.name.endswith(FILE_EXTENSION)
        ]
        return sorted(name for name in names if name.startswith(prefix))

    def create_collection(self, collection: str) -> "FileStorage":
        return FileStorage(self.directory, collection)

    def get_all_collection_names(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        collections: list[str] = []
        for folder, dirnames, filenames in os.walk(self.directory):
            # Every listed name must map back to its directory through
            # create_collection(), so dotted and hidden directories are skipped
            skipped = [d for d in dirnames if "." in d]
            for name in skipped:
                logger.debug("Skipping directory %s", Path(folder) / name)
            dirnames[:] = [d for d in dirnames if "." not in d]
            relative = Path(folder).relative_to(self.directory)
            if relative == Path("."):
                continue
            if any(f.endswith(FILE_EXTENSION) for f in filenames):
                collections.append(".".join(relative.parts))
        return sorted(collections)
