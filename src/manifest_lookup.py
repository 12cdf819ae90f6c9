"""Helpers for reading optional values out of a parsed manifest."""

from typing import Any


def manifest_lookup(doc: Any, *keys: str) -> Any:
    """Follow keys through nested objects, returning None on any miss."""
    node = doc
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def manifest_string(doc: Any, *keys: str) -> str | None:
    """Return the value at keys if it is a string."""
    value = manifest_lookup(doc, *keys)
    return value if isinstance(value, str) else None


def manifest_mapping(doc: Any, *keys: str) -> dict[str, Any]:
    """Return the object at keys, or an empty dict when absent or not an object."""
    value = manifest_lookup(doc, *keys)
    return value if isinstance(value, dict) else {}


def has_tag(tags: Any, tag: str) -> bool:
    """Whether an installer entry's tag list contains tag."""
    return isinstance(tags, list) and tag in tags
