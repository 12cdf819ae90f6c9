"""Logic for choosing which manifest file name to look for."""

import os
from collections.abc import Mapping
from typing import Any


def manifest_file_name(
    config: dict[str, Any], environ: Mapping[str, str] | None = None
) -> str:
    """Return the manifest name, honouring the environment override.

    Composer itself reads an alternate manifest name from ``COMPOSER``; a
    blank value counts as unset.
    """
    if environ is None:
        environ = os.environ
    manifest = config["manifest"]
    override = environ.get(manifest["env_var"], "").strip()
    return override or manifest["file_name"]
