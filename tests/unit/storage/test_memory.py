"""Unit tests for MemoryStorage."""

from confctl.storage.base import DEFAULT_COLLECTION
from confctl.storage.memory import MemoryStorage


class TestMemoryStorage:
    """Tests for reading and writing objects."""

    def test_read_missing_returns_none(self) -> None:
        """Reading an unknown object returns None."""
        assert MemoryStorage().read("missing") is None

    def test_write_then_read(self) -> None:
        """Written data can be read back."""
        storage = MemoryStorage()
        storage.write("system.site", {"name": "Example"})

        assert storage.read("system.site") == {"name": "Example"}
        assert storage.exists("system.site")

    def test_read_returns_copy(self) -> None:
        """Mutating read data does not change the stored object."""
        storage = MemoryStorage()
        storage.write("system.site", {"page": {"front": "/node"}})

        data = storage.read("system.site")
        assert data is not None
        data["page"]["front"] = "/changed"

        assert storage.read("system.site") == {"page": {"front": "/node"}}

    def test_write_stores_copy(self) -> None:
        """Mutating the written dict afterwards does not change storage."""
        storage = MemoryStorage()
        data = {"name": "Example"}
        storage.write("system.site", data)
        data["name"] = "Changed"

        assert storage.read("system.site") == {"name": "Example"}

    def test_delete(self) -> None:
        """delete() removes an object and reports whether it existed."""
        storage = MemoryStorage()
        storage.write("system.site", {})

        assert storage.delete("system.site") is True
        assert storage.delete("system.site") is False
        assert storage.read("system.site") is None

    def test_list_all_sorted_with_prefix(self) -> None:
        """list_all() is sorted and filters by prefix."""
        storage = MemoryStorage()
        for name in ("views.view.b", "system.site", "views.view.a"):
            storage.write(name, {})

        assert storage.list_all() == ["system.site", "views.view.a", "views.view.b"]
        assert storage.list_all("views.") == ["views.view.a", "views.view.b"]

    def test_read_multiple_skips_missing(self) -> None:
        """read_multiple() returns only existing objects."""
        storage = MemoryStorage()
        storage.write("a", {"x": 1})

        assert storage.read_multiple(["a", "b"]) == {"a": {"x": 1}}


class TestMemoryCollections:
    """Tests for collection handling."""

    def test_default_collection(self) -> None:
        """A new storage is positioned on the default collection."""
        assert MemoryStorage().get_collection_name() == DEFAULT_COLLECTION

    def test_collections_are_isolated(self) -> None:
        """Writes to one collection do not leak into another."""
        storage = MemoryStorage()
        french = storage.create_collection("language.fr")
        french.write("system.site", {"name": "Exemple"})

        assert storage.read("system.site") is None
        assert storage.list_all() == []
        assert french.get_collection_name() == "language.fr"

    def test_collections_share_backing_store(self) -> None:
        """Collection views created from each other see the same data."""
        storage = MemoryStorage()
        storage.create_collection("language.fr").write("system.site", {"name": "Exemple"})

        again = storage.create_collection("language.fr")

        assert again.read("system.site") == {"name": "Exemple"}

    def test_get_all_collection_names(self) -> None:
        """Named collections are listed sorted, without the default."""
        storage = MemoryStorage()
        storage.write("system.site", {})
        storage.create_collection("language.fr").write("system.site", {})
        storage.create_collection("language.de").write("system.site", {})

        assert storage.get_all_collection_names() == ["language.de", "language.fr"]

    def test_emptied_collection_not_listed(self) -> None:
        """A collection whose last object is deleted is no longer listed."""
        storage = MemoryStorage()
        french = storage.create_collection("language.fr")
        french.write("system.site", {})
        french.delete("system.site")

        assert storage.get_all_collection_names() == []
