"""Copying and comparing configuration between two storages.

copy_config() is an additive overwrite: every object found in the
source ends up in the destination, and objects that only exist in the
destination are left alone. compute_changes() and import_changes()
back the import commands, which can also remove objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from confctl.core.changes import ChangeSet
from confctl.storage.base import DEFAULT_COLLECTION

if TYPE_CHECKING:
    from confctl.storage.base import Storage

logger = logging.getLogger(__name__)


def _on_collection(storage: Storage, collection: str) -> Storage:
    if storage.get_collection_name() != collection:
        return storage.create_collection(collection)
    return storage


def _copy_collection(source: Storage, destination: Storage) -> int:
    copied = 0
    for name in source.list_all():
        destination.write(name, source.read(name) or {})
        logger.debug("Copied %s (collection %r)", name, source.get_collection_name())
        copied += 1
    return copied


def copy_config(source: Storage, destination: Storage) -> int:
    """Copy every configuration object from source to destination.

    The default collection is copied first, then each named collection
    of the source. Storage errors propagate as raised; objects written
    before a failure stay written.

    Args:
        source: Storage to read from.
        destination: Storage to write to.

    Returns:
        Number of objects copied across all collections.
    """
    source = _on_collection(source, DEFAULT_COLLECTION)
    destination = _on_collection(destination, DEFAULT_COLLECTION)

    copied = _copy_collection(source, destination)

    for collection in source.get_all_collection_names():
        copied += _copy_collection(
            source.create_collection(collection),
            destination.create_collection(collection),
        )

    logger.info("Copied %d config object(s)", copied)
    return copied


def _collections(source: Storage, target: Storage) -> list[str]:
    named = set(source.get_all_collection_names()) | set(target.get_all_collection_names())
    named.discard(DEFAULT_COLLECTION)
    return [DEFAULT_COLLECTION, *sorted(named)]


def compute_changes(source: Storage, target: Storage, partial: bool = False) -> ChangeSet:
    """Compare two storages as if source were about to be imported into target.

    Args:
        source: Storage holding the incoming configuration.
        target: Storage that would be changed.
        partial: Do not report objects missing from source as deletions.

    Returns:
        Change set with "create", "update", and "delete" lists per
        collection. Collections without changes are omitted.
    """
    changes: ChangeSet = {}
    for collection in _collections(source, target):
        source_view = _on_collection(source, collection)
        target_view = _on_collection(target, collection)
        source_names = source_view.list_all()
        target_names = set(target_view.list_all())

        create: list[str] = []
        update: list[str] = []
        for name in source_names:
            if name not in target_names:
                create.append(name)
            elif source_view.read(name) != target_view.read(name):
                update.append(name)

        delete = [] if partial else sorted(target_names - set(source_names))

        collection_changes = {
            change: names
            for change, names in (("delete", delete), ("update", update), ("create", create))
            if names
        }
        if collection_changes:
            changes[collection] = collection_changes
    return changes


def import_changes(source: Storage, target: Storage, changes: ChangeSet) -> int:
    """Apply a change set computed by compute_changes().

    Creates and updates are copied from source; deletions are removed
    from target.

    Returns:
        Number of objects written or deleted.
    """
    applied = 0
    for collection, collection_changes in changes.items():
        source_view = _on_collection(source, collection)
        target_view = _on_collection(target, collection)
        for name in collection_changes.get("delete", []):
            target_view.delete(name)
            applied += 1
        for change in ("update", "create"):
            for name in collection_changes.get(change, []):
                target_view.write(name, source_view.read(name) or {})
                applied += 1
        logger.debug("Imported collection %r", collection)
    logger.info("Imported %d config change(s)", applied)
    return applied
