"""Logic for collecting content directories declared as installer paths."""

from typing import Any

from src.manifest_lookup import has_tag, manifest_mapping
from src.sanitize_installer_path import sanitize_installer_path

INSTALLER_KEYS = ("installer-paths", "custom-installer")

# type tag -> ResolutionResult field
CONTENT_TAGS = {
    "type:wordpress-plugin": "plugins_dir",
    "type:wordpress-muplugin": "mu_plugins_dir",
    "type:wordpress-theme": "themes_dir",
    "type:wordpress-dropin": "dropins_dir",
}


def installer_paths(doc: dict[str, Any]) -> dict[str, str]:
    """Map content directory fields to the sanitized paths the manifest declares.

    ``extra.installer-paths`` is scanned before ``extra.custom-installer``.
    A later declaration for the same content type replaces an earlier one.
    Paths are relative to the manifest's directory.
    """
    found: dict[str, str] = {}
    for key in INSTALLER_KEYS:
        for install_path, tags in manifest_mapping(doc, "extra", key).items():
            for tag, field_name in CONTENT_TAGS.items():
                if has_tag(tags, tag):
                    found[field_name] = sanitize_installer_path(install_path)
    return found
