"""Tests for the WordPress root locator."""

import json
import os
from pathlib import Path
from typing import Any

import pytest

from src.resolution_result import ResolutionResult
from src.root_locator import RootLocator


def write_manifest(directory: Path, data: Any, name: str = "composer.json") -> Path:
    """Write a manifest into directory, creating it if needed."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(json.dumps(data), encoding="utf-8")
    return directory


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project whose manifest installs WordPress into web/."""
    return write_manifest(
        tmp_path / "project",
        {"extra": {"wordpress-install-dir": "web"}},
    )


def test_no_manifest_anywhere(tmp_path: Path) -> None:
    """Verify that a tree without a manifest stays unresolved."""
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    locator = RootLocator()
    assert not locator.locate_root(str(start))
    assert locator.result == ResolutionResult.unresolved()
    assert locator.web_root is None
    assert locator.composer_root is None
    assert locator.vendor_dir is None
    assert locator.plugins_dir is None
    assert locator.mu_plugins_dir is None
    assert locator.themes_dir is None
    assert locator.dropins_dir is None


def test_getters_unresolved_before_locate() -> None:
    """Verify that a fresh locator reports nothing."""
    locator = RootLocator()
    assert locator.web_root is None
    assert not locator.result.is_resolved


def test_wordpress_install_dir(project: Path) -> None:
    """Verify the wordpress-install-dir convention and all defaults."""
    root = str(project)
    locator = RootLocator()
    assert locator.locate_root(root)
    assert locator.composer_root == root
    assert locator.web_root == f"{root}/web"
    assert locator.vendor_dir == f"{root}/vendor"
    assert locator.plugins_dir == f"{root}/web/wp-content/plugins"
    assert locator.mu_plugins_dir == f"{root}/web/wp-content/mu-plugins"
    assert locator.themes_dir == f"{root}/web/wp-content/themes"
    assert locator.dropins_dir == f"{root}/web/wp-content"


def test_webroot_dir(tmp_path: Path) -> None:
    """Verify the webroot-dir convention with a trailing slash."""
    root = str(write_manifest(tmp_path, {"extra": {"webroot-dir": "public/"}}))
    locator = RootLocator()
    assert locator.locate_root(root)
    assert locator.composer_root == root
    assert locator.web_root == f"{root}/public"


def test_custom_installer_core(tmp_path: Path) -> None:
    """Verify the custom-installer convention."""
    root = str(
        write_manifest(
            tmp_path, {"extra": {"custom-installer": {"web": ["type:wordpress-core"]}}}
        )
    )
    locator = RootLocator()
    assert locator.locate_root(root)
    assert locator.composer_root == root
    assert locator.web_root == f"{root}/web"


def test_custom_vendor_dir(tmp_path: Path) -> None:
    """Verify that config.vendor-dir relocates the vendor directory."""
    root = str(
        write_manifest(
            tmp_path,
            {"extra": {"webroot-dir": "web"}, "config": {"vendor-dir": "lib/"}},
        )
    )
    locator = RootLocator()
    assert locator.locate_root(root)
    assert locator.vendor_dir == f"{root}/lib"


def test_installer_paths_are_sanitized(tmp_path: Path) -> None:
    """Verify that placeholders are stripped from declared content paths."""
    root = str(
        write_manifest(
            tmp_path,
            {
                "extra": {
                    "wordpress-install-dir": "web/wp",
                    "installer-paths": {
                        "web/app/plugins/{name}": ["type:wordpress-plugin"],
                        "web/app/mu-plugins/{$name}/": ["type:wordpress-muplugin"],
                        "web/app/themes/{$name}/": ["type:wordpress-theme"],
                    },
                }
            },
        )
    )
    locator = RootLocator()
    assert locator.locate_root(root)
    assert locator.web_root == f"{root}/web/wp"
    assert locator.plugins_dir == f"{root}/web/app/plugins"
    assert locator.mu_plugins_dir == f"{root}/web/app/mu-plugins"
    assert locator.themes_dir == f"{root}/web/app/themes"
    assert locator.dropins_dir == f"{root}/web/wp/wp-content"


def test_walks_up_two_levels(project: Path) -> None:
    """Verify that the search ascends from a nested start directory."""
    start = project / "web" / "wp-content"
    start.mkdir(parents=True)
    locator = RootLocator()
    assert locator.locate_root(str(start))
    assert locator.composer_root == str(project)


def test_skips_unrelated_manifest(project: Path) -> None:
    """Verify that a manifest without a WordPress layout is passed over."""
    library = write_manifest(project / "packages" / "lib", {"name": "acme/lib"})
    start = library / "src"
    start.mkdir()
    locator = RootLocator()
    assert locator.locate_root(str(start))
    assert locator.composer_root == str(project)


def test_skips_malformed_manifest(project: Path) -> None:
    """Verify that invalid JSON in a nested directory does not stop the walk."""
    nested = project / "web"
    nested.mkdir()
    (nested / "composer.json").write_text("{oops", encoding="utf-8")
    locator = RootLocator()
    assert locator.locate_root(str(nested))
    assert locator.composer_root == str(project)


def test_repeat_locate_is_idempotent(project: Path) -> None:
    """Verify that locating twice yields the same result."""
    locator = RootLocator()
    assert locator.locate_root(str(project))
    first = locator.result
    assert locator.locate_root(str(project))
    assert locator.result == first


def test_failed_locate_resets_previous_result(project: Path, tmp_path: Path) -> None:
    """Verify that a failed search does not leave an earlier result behind."""
    locator = RootLocator()
    assert locator.locate_root(str(project))
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    assert not locator.locate_root(str(elsewhere))
    assert locator.composer_root is None


def test_alternate_manifest_name(tmp_path: Path) -> None:
    """Verify that only the configured manifest name is read."""
    write_manifest(tmp_path, {"extra": {"webroot-dir": "web"}}, name="wp.json")
    assert not RootLocator().locate_root(str(tmp_path))
    assert RootLocator(manifest_name="wp.json").locate_root(str(tmp_path))


def test_custom_defaults(project: Path) -> None:
    """Verify that fallback locations can be overridden."""
    locator = RootLocator(defaults={"plugins_dir": "app/plugins"})
    assert locator.locate_root(str(project))
    assert locator.plugins_dir == f"{project}/web/app/plugins"
    assert locator.themes_dir == f"{project}/web/wp-content/themes"


def test_symlinked_start_resolves_target(tmp_path: Path) -> None:
    """Verify that a linked start directory is followed to its target."""
    target = write_manifest(tmp_path / "real", {"extra": {"webroot-dir": "web"}})
    link = tmp_path / "link"
    link.symlink_to(target, target_is_directory=True)
    locator = RootLocator()
    assert locator.locate_root(str(link))
    assert locator.composer_root == os.path.realpath(target)


def test_symlink_falls_back_to_unresolved_walk(project: Path, tmp_path: Path) -> None:
    """Verify that the link's own ancestors are searched on the second pass."""
    outside = tmp_path / "outside"
    outside.mkdir()
    link = project / "linked"
    link.symlink_to(outside, target_is_directory=True)
    locator = RootLocator()
    assert locator.locate_root(str(link))
    assert locator.composer_root == str(project)


def test_is_valid_root(project: Path, tmp_path: Path) -> None:
    """Verify single-directory validation."""
    locator = RootLocator()
    assert locator.is_valid_root(str(project))
    assert not locator.is_valid_root(str(tmp_path))
    assert not locator.is_valid_root("")
    assert not locator.is_valid_root(str(project / "composer.json"))
    # resolve never touches locator state
    assert locator.composer_root is None


def test_resolution_result_partial_is_not_resolved() -> None:
    """Verify that a partially filled result does not count as resolved."""
    partial = ResolutionResult(composer_root="/srv", web_root="/srv/web")
    assert not partial.is_resolved
    assert partial.to_dict()["composer-root"] == "/srv"
    assert partial.to_dict()["vendor-dir"] is None


def test_skips_deeply_nested_manifest(project: Path) -> None:
    """Verify that a manifest too deeply nested to parse does not stop the walk."""
    package = project / "packages" / "deep"
    package.mkdir(parents=True)
    depth = 100_000
    (package / "composer.json").write_text(
        '{"a": ' + "[" * depth + "]" * depth + "}", encoding="utf-8"
    )
    locator = RootLocator()
    assert locator.locate_root(str(package))
    assert locator.composer_root == str(project)
