"""Logic for cleaning installer path declarations."""

import re

PLACEHOLDER_RE = re.compile(r"\s*\{[^}]*\}")


def sanitize_installer_path(path: str) -> str:
    """Strip `{name}` style placeholders and trailing slashes from a path.

    Installer paths such as ``web/app/plugins/{$name}/`` name a directory per
    package; only the shared parent is of interest here.
    """
    path = path.rstrip("/")
    path = PLACEHOLDER_RE.sub("", path)
    return path.strip().rstrip("/")
