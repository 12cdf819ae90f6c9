"""Factory for a RootLocator configured from settings and the environment."""

from collections.abc import Mapping
from typing import Any

from src.manifest_file_name import manifest_file_name
from src.root_locator import RootLocator


def build_locator(
    config: dict[str, Any], environ: Mapping[str, str] | None = None
) -> RootLocator:
    """Create a RootLocator, reading the environment once up front."""
    return RootLocator(
        manifest_name=manifest_file_name(config, environ),
        defaults=config.get("defaults"),
    )
