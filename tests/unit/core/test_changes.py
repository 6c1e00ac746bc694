"""Unit tests for change set rows."""

from confctl.core.changes import (
    CHANGE_STYLES,
    ChangeRow,
    ChangeSet,
    build_change_rows,
    count_changes,
    is_empty,
)

CHANGES: ChangeSet = {
    "": {
        "create": ["views.view.new"],
        "update": ["system.site", "system.performance"],
        "delete": ["block.block.old"],
    },
    "language.fr": {
        "rename": ["system.menu"],
        "update": ["system.site"],
    },
}


class TestBuildChangeRows:
    """Tests for build_change_rows."""

    def test_row_count(self) -> None:
        """One row per (collection, change type, config) triple."""
        rows = build_change_rows(CHANGES)

        assert len(rows) == count_changes(CHANGES) == 6

    def test_change_type_order(self) -> None:
        """Rows are grouped delete, update, create, then other types."""
        rows = build_change_rows(CHANGES)

        assert [row.as_tuple() for row in rows] == [
            ("", "block.block.old", "delete"),
            ("", "system.site", "update"),
            ("", "system.performance", "update"),
            ("", "views.view.new", "create"),
            ("language.fr", "system.site", "update"),
            ("language.fr", "system.menu", "rename"),
        ]

    def test_no_color_has_no_style(self) -> None:
        """Without color, rows carry plain operation text."""
        rows = build_change_rows(CHANGES, use_color=False)

        assert all(row.style is None for row in rows)
        assert {row.operation for row in rows} == {"delete", "update", "create", "rename"}

    def test_color_styles(self) -> None:
        """With color, known operations get their style; others stay plain."""
        rows = build_change_rows(CHANGES, use_color=True)
        styles = {row.operation: row.style for row in rows}

        assert styles["delete"] == CHANGE_STYLES["delete"] == "change.delete"
        assert styles["update"] == "change.update"
        assert styles["create"] == "change.create"
        assert styles["rename"] is None

    def test_empty(self) -> None:
        """An empty change set yields no rows."""
        assert build_change_rows({}) == []
        assert is_empty({})
        assert is_empty({"": {"create": []}})
        assert not is_empty(CHANGES)


class TestChangeRow:
    """Tests for ChangeRow."""

    def test_as_tuple(self) -> None:
        """as_tuple() returns the three plain cells."""
        row = ChangeRow("", "system.site", "update", "change.update")

        assert row.as_tuple() == ("", "system.site", "update")
