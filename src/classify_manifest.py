"""Logic for recognising how a manifest declares the WordPress web root."""

from typing import Any

from src.manifest_lookup import (
    has_tag,
    manifest_lookup,
    manifest_mapping,
    manifest_string,
)

CORE_TAG = "type:wordpress-core"


def classify_manifest(doc: dict[str, Any]) -> str | None:
    """Return the web root path declared by the manifest, relative to it.

    Conventions are tried in order and the first one present decides:

    1. ``extra.wordpress-install-dir`` (johnpbloch/wordpress-core-installer)
    2. ``extra.webroot-dir`` (fancyguy/webroot-installer)
    3. ``extra.custom-installer`` entries tagged ``type:wordpress-core``
       (oomphinc/composer-installers-extender style); the last tagged entry wins.
    """
    install_dir = manifest_string(doc, "extra", "wordpress-install-dir")
    if install_dir is not None:
        return install_dir

    webroot_dir = manifest_string(doc, "extra", "webroot-dir")
    if webroot_dir is not None:
        return webroot_dir

    if isinstance(manifest_lookup(doc, "extra", "custom-installer"), dict):
        core_path = None
        custom = manifest_mapping(doc, "extra", "custom-installer")
        for install_path, tags in custom.items():
            if has_tag(tags, CORE_TAG):
                core_path = install_path
        return core_path

    return None
