"""Locate the Composer-managed WordPress installation containing a path.

Walks up from the start path until a composer.json declares a WordPress
install directory, then prints the resolved web root, vendor directory and
content directories.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from src.build_locator import build_locator
from src.load_config import load_config
from src.resolution_result import ResolutionResult

FIELDS = [
    "composer-root",
    "web-root",
    "vendor-dir",
    "plugins-dir",
    "mu-plugins-dir",
    "themes-dir",
    "dropins-dir",
]


def format_result(result: ResolutionResult, fmt: str) -> str:
    """Render a resolved result as text, JSON or YAML."""
    data = result.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False).rstrip("\n")
    width = max(len(k) for k in data)
    return "\n".join(f"{k + ':':<{width + 1}} {v}" for k, v in data.items())


def run_locate(args: argparse.Namespace) -> int:
    """Locate the root and print it; return the process exit status."""
    config = load_config(args.config)
    locator = build_locator(config)

    # The walk stops at "." so relative paths must be made absolute first
    start_path = os.path.abspath(args.start_path)
    if not locator.locate_root(start_path):
        print(
            f"No WordPress installation found above: {args.start_path}",
            file=sys.stderr,
        )
        return 1

    if args.field:
        print(locator.result.to_dict()[args.field])
    else:
        print(format_result(locator.result, args.format))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the lookup."""
    ap = argparse.ArgumentParser(
        description="Find the root of a Composer-managed WordPress installation.",
    )
    ap.add_argument(
        "start_path",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory to start searching from (default: current directory)",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )
    ap.add_argument(
        "--field",
        choices=FIELDS,
        help="Print only this directory",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each candidate directory as it is checked",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_locate(args)


if __name__ == "__main__":
    raise SystemExit(main())
