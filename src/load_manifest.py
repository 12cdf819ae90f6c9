"""Logic for reading a Composer manifest from a candidate directory."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def load_manifest(directory: str, manifest_name: str) -> dict[str, Any] | None:
    """Load and parse the manifest in directory.

    Returns None when the file is missing, unreadable, not valid JSON, or not
    a JSON object. None of these are errors for the caller; the directory is
    simply not a usable root.
    """
    path = os.path.join(directory, manifest_name)
    if not os.path.isfile(path):
        return None

    try:
        with open(path, encoding="utf-8") as f:
            doc = json.load(f)
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from pathologically nested documents
        logger.debug("Ignoring malformed manifest %s: %s", path, e)
        return None

    if not isinstance(doc, dict):
        logger.debug("Ignoring manifest %s: top level is not an object", path)
        return None
    return doc
