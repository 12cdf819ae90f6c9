"""Logic for locating the root of a Composer-managed WordPress installation."""

import logging
import os
from collections.abc import Iterator, Mapping

from src.classify_manifest import classify_manifest
from src.installer_paths import installer_paths
from src.join_path import join_path
from src.load_manifest import load_manifest
from src.manifest_lookup import manifest_string
from src.resolution_result import ResolutionResult
from src.shift_path_up import shift_path_up

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "composer.json"

# Fallback locations. vendor_dir is relative to the composer root, the
# content directories to the web root.
DEFAULT_LOCATIONS: dict[str, str] = {
    "vendor_dir": "vendor",
    "plugins_dir": "wp-content/plugins",
    "mu_plugins_dir": "wp-content/mu-plugins",
    "themes_dir": "wp-content/themes",
    "dropins_dir": "wp-content",
}

CONTENT_FIELDS = ("plugins_dir", "mu_plugins_dir", "themes_dir", "dropins_dir")


class RootLocator:
    """Walks up from a start path to the directory whose manifest describes WordPress.

    The last successful (or failed) search is exposed through read-only
    properties. A locator holds state between calls; use one per thread.
    """

    def __init__(
        self,
        manifest_name: str = DEFAULT_MANIFEST_NAME,
        defaults: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize with the manifest file name and fallback locations."""
        self.manifest_name = manifest_name
        self.defaults = {**DEFAULT_LOCATIONS, **(defaults or {})}
        self._result = ResolutionResult.unresolved()

    def locate_root(self, start_path: str) -> bool:
        """Search start_path and its ancestors for a WordPress root.

        Symbolic links are resolved on the first pass and kept on the second,
        so a root reachable through a link's target is preferred.
        """
        self._result = ResolutionResult.unresolved()
        start_path = os.fspath(start_path)

        for follow_symlinks in (True, False):
            for candidate in self._walk_up(start_path, follow_symlinks=follow_symlinks):
                result = self.resolve(candidate)
                if result.is_resolved:
                    self._result = result
                    logger.info("Found WordPress root at %s", result.composer_root)
                    return True

        logger.info("No WordPress root found above %s", start_path)
        return False

    def _walk_up(self, start_path: str, *, follow_symlinks: bool) -> Iterator[str]:
        """Yield start_path and each of its ancestors in turn."""
        path: str | None = start_path
        while path:
            if follow_symlinks and os.path.islink(path):
                path = os.path.realpath(path)
            yield path
            path = shift_path_up(path)

    def is_valid_root(self, path: str) -> bool:
        """Whether path is the root of a WordPress installation."""
        return self.resolve(path).is_resolved

    def resolve(self, path: str) -> ResolutionResult:
        """Resolve every directory for the installation rooted at path.

        Returns an unresolved result unless all directories can be derived.
        Locator state is left untouched.
        """
        if not path or not os.path.isdir(path):
            return ResolutionResult.unresolved()

        doc = load_manifest(path, self.manifest_name)
        if doc is None:
            return ResolutionResult.unresolved()

        web_dir = classify_manifest(doc)
        if web_dir is None:
            logger.debug("Manifest in %s declares no WordPress install dir", path)
            return ResolutionResult.unresolved()

        web_root = join_path(path, web_dir)
        vendor_dir = manifest_string(doc, "config", "vendor-dir")
        if vendor_dir is None:
            vendor_dir = self.defaults["vendor_dir"]

        dirs = {
            field_name: join_path(path, install_path)
            for field_name, install_path in installer_paths(doc).items()
        }
        for field_name in CONTENT_FIELDS:
            dirs.setdefault(field_name, join_path(web_root, self.defaults[field_name]))

        result = ResolutionResult(
            composer_root=path,
            web_root=web_root,
            vendor_dir=join_path(path, vendor_dir),
            **dirs,
        )
        if not result.is_resolved:
            logger.debug("Discarding partial resolution for %s", path)
            return ResolutionResult.unresolved()
        logger.debug("Resolved %s: %s", path, result)
        return result

    @property
    def result(self) -> ResolutionResult:
        """The outcome of the last locate_root call."""
        return self._result

    @property
    def web_root(self) -> str | None:
        """Public web directory holding the WordPress core files."""
        return self._result.web_root

    @property
    def composer_root(self) -> str | None:
        """Directory containing the manifest."""
        return self._result.composer_root

    @property
    def vendor_dir(self) -> str | None:
        """Composer vendor directory."""
        return self._result.vendor_dir

    @property
    def plugins_dir(self) -> str | None:
        """Directory holding regular plugins."""
        return self._result.plugins_dir

    @property
    def mu_plugins_dir(self) -> str | None:
        """Directory holding must-use plugins."""
        return self._result.mu_plugins_dir

    @property
    def themes_dir(self) -> str | None:
        """Directory holding themes."""
        return self._result.themes_dir

    @property
    def dropins_dir(self) -> str | None:
        """Directory holding drop-in files."""
        return self._result.dropins_dir
