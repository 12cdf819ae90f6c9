"""Utility for stepping one directory towards the filesystem root."""

import os


def shift_path_up(path: str) -> str | None:
    """Return the parent of path, or None when no further ascent is possible."""
    parent = os.path.dirname(path)
    if parent in ("", ".", path):
        return None
    return parent
