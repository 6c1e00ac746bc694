"""Unit tests for dotted key helpers."""

from confctl.utils.nested import deep_merge, get_nested, set_nested, unset_nested


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merges_nested(self) -> None:
        """Nested dictionaries are merged, scalars replaced."""
        base = {"a": 1, "b": {"c": 2, "d": 3}}

        result = deep_merge(base, {"b": {"c": 20}, "e": 5})

        assert result == {"a": 1, "b": {"c": 20, "d": 3}, "e": 5}
        assert base == {"a": 1, "b": {"c": 2, "d": 3}}

    def test_result_does_not_alias_overlay(self) -> None:
        """Changing the result leaves the overlay untouched."""
        overlay = {"page": {"front": "/home"}}

        result = deep_merge({}, overlay)
        result["page"]["front"] = "/changed"

        assert overlay == {"page": {"front": "/home"}}


class TestGetNested:
    """Tests for get_nested function."""

    def test_empty_key_returns_data(self) -> None:
        """An empty key returns the whole dictionary."""
        data = {"a": 1}

        assert get_nested(data, "") is data

    def test_dotted_key(self) -> None:
        """Dotted keys walk nested dictionaries."""
        assert get_nested({"page": {"front": "/node"}}, "page.front") == "/node"

    def test_missing_segments(self) -> None:
        """Missing keys and non-dict segments return None."""
        data = {"page": {"front": "/node"}, "name": "x"}

        assert get_nested(data, "page.back") is None
        assert get_nested(data, "name.first") is None
        assert get_nested(data, "missing") is None


class TestSetNested:
    """Tests for set_nested function."""

    def test_creates_intermediate_dicts(self) -> None:
        """Intermediate levels are created."""
        data: dict = {}

        set_nested(data, "a.b.c", 1)

        assert data == {"a": {"b": {"c": 1}}}

    def test_replaces_scalar_on_path(self) -> None:
        """Scalars along the path are replaced by dictionaries."""
        data = {"a": "text"}

        set_nested(data, "a.b", 1)

        assert data == {"a": {"b": 1}}


class TestUnsetNested:
    """Tests for unset_nested function."""

    def test_removes_key(self) -> None:
        """Existing keys are removed."""
        data = {"page": {"front": "/node", "403": ""}}

        assert unset_nested(data, "page.front")
        assert data == {"page": {"403": ""}}

    def test_missing_key(self) -> None:
        """Missing keys report False and change nothing."""
        data = {"page": {"front": "/node"}}

        assert not unset_nested(data, "page.back")
        assert not unset_nested(data, "other.key")
        assert data == {"page": {"front": "/node"}}
