"""In-memory configuration storage."""

import copy
import logging
from typing import Any

from confctl.storage.base import DEFAULT_COLLECTION, Storage

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """Storage that keeps objects in a dictionary.

    All collection views created from one MemoryStorage share the same
    backing dictionary. Data is deep-copied on the way in and out so
    callers never alias stored objects.
    """

    def __init__(
        self,
        collection: str = DEFAULT_COLLECTION,
        _data: dict[str, dict[str, dict[str, Any]]] | None = None,
    ) -> None:
        super().__init__(collection)
        self._data: dict[str, dict[str, dict[str, Any]]] = _data if _data is not None else {}

    def read(self, name: str) -> dict[str, Any] | None:
        data = self._data.get(self._collection, {}).get(name)
        return copy.deepcopy(data) if data is not None else None

    def write(self, name: str, data: dict[str, Any]) -> None:
        logger.debug("Writing %s to memory collection %r", name, self._collection)
        self._data.setdefault(self._collection, {})[name] = copy.deepcopy(data)

    def delete(self, name: str) -> bool:
        objects = self._data.get(self._collection)
        if not objects or name not in objects:
            return False
        del objects[name]
        if not objects:
            del self._data[self._collection]
        return True

    def list_all(self, prefix: str = "") -> list[str]:
        objects = self._data.get(self._collection, {})
        return sorted(name for name in objects if name.startswith(prefix))

    def create_collection(self, collection: str) -> "MemoryStorage":
        return MemoryStorage(collection, _data=self._data)

    def get_all_collection_names(self) -> list[str]:
        return sorted(
            collection
            for collection, objects in self._data.items()
            if collection != DEFAULT_COLLECTION and objects
        )
