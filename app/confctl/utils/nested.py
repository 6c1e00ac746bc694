"""Helpers for nested dictionaries addressed by dotted keys.

A dotted key such as "page.front" walks one dictionary level per
segment.
"""

import copy
from typing import Any


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 20}, "e": 5})
        {'a': 1, 'b': {'c': 20, 'd': 3}, 'e': 5}
    """
    result = copy.deepcopy(base)

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result


def get_nested(data: dict[str, Any], key: str) -> Any:
    """Look up a dotted key.

    Args:
        data: Dictionary to search.
        key: Dotted key path. An empty key returns the whole dictionary.

    Returns:
        The value, or None if any segment is missing.
    """
    if not key:
        return data
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def set_nested(data: dict[str, Any], key: str, value: Any) -> None:
    """Assign a value at a dotted key, creating intermediate dictionaries.

    Non-dict values found along the path are replaced by dictionaries.
    """
    parts = key.split(".")
    current = data
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


def unset_nested(data: dict[str, Any], key: str) -> bool:
    """Remove a dotted key.

    Returns:
        True if the key existed and was removed, False otherwise.
    """
    parts = key.split(".")
    current: Any = data
    for part in parts[:-1]:
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    if not isinstance(current, dict) or parts[-1] not in current:
        return False
    del current[parts[-1]]
    return True
