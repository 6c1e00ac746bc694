"""Change set rows for the config changes table.

A change set maps a collection name to change types ("create",
"update", "delete", or anything else) to the configuration object
names affected. This module flattens it into neutral rows that carry a
style tag instead of terminal escape codes; cli.display renders them.
"""

from dataclasses import dataclass

# collection -> change type -> config names
ChangeSet = dict[str, dict[str, list[str]]]

CHANGES_HEADER = ("Collection", "Config", "Operation")

# Known change types, in display order
CHANGE_ORDER = ("delete", "update", "create")

# Theme style per change type (red, yellow, green in the bundled theme)
CHANGE_STYLES: dict[str, str] = {
    "delete": "change.delete",
    "update": "change.update",
    "create": "change.create",
}


@dataclass(frozen=True, slots=True)
class ChangeRow:
    """One row of the config changes table.

    Attributes:
        collection: Collection name ("" for the default collection).
        config: Configuration object name.
        operation: Change type text.
        style: Theme style tag for the operation, or None for plain text.
    """

    collection: str
    config: str
    operation: str
    style: str | None = None

    def as_tuple(self) -> tuple[str, str, str]:
        """Return the row cells as plain text."""
        return (self.collection, self.config, self.operation)


def _ordered_change_types(changes: dict[str, list[str]]) -> list[str]:
    known = [change for change in CHANGE_ORDER if change in changes]
    others = [change for change in changes if change not in CHANGE_ORDER]
    return known + others


def build_change_rows(changes: ChangeSet, use_color: bool = False) -> list[ChangeRow]:
    """Flatten a change set into table rows.

    Collections keep their input order. Within a collection, rows are
    grouped delete, update, create, then any other change type in input
    order.

    Args:
        changes: Change set keyed by collection.
        use_color: Attach style tags to known change types.

    Returns:
        One ChangeRow per (collection, change type, config name).
    """
    rows: list[ChangeRow] = []
    for collection, collection_changes in changes.items():
        for change in _ordered_change_types(collection_changes):
            style = CHANGE_STYLES.get(change) if use_color else None
            for config in collection_changes[change]:
                rows.append(ChangeRow(collection, config, change, style))
    return rows


def count_changes(changes: ChangeSet) -> int:
    """Count the (collection, change type, config name) triples."""
    return sum(len(configs) for per_type in changes.values() for configs in per_type.values())


def is_empty(changes: ChangeSet) -> bool:
    """Check if a change set holds no changes."""
    return count_changes(changes) == 0
