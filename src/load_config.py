"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from src.deep_merge import deep_merge
from src.root_locator import DEFAULT_LOCATIONS, DEFAULT_MANIFEST_NAME

DEFAULT_CONFIG: dict[str, Any] = {
    "manifest": {
        "file_name": DEFAULT_MANIFEST_NAME,
        "env_var": "COMPOSER",
    },
    "defaults": dict(DEFAULT_LOCATIONS),
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise SystemExit(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        config = deep_merge(config, user_config)
    return config
