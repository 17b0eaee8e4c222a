"""
pkg_release.cli — `pkg-release` console entrypoint.

Usage:
    cd <package repository> && pkg-release

Prints the archive path on success (exit 0); prints the error on stderr and
exits 1 on failure.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pkg_release.log import logger
from pkg_release.models import MANIFEST_FILENAME
from pkg_release.release import build_release


def find_repository_root(start: Path) -> Path:
    """Walk up from ``start`` to the nearest directory holding controller.php.

    Falls back to ``start`` itself so the manifest check reports the error.
    """
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / MANIFEST_FILENAME).is_file():
            return candidate
    return start


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Build <handle>-<version>.zip from the HEAD commit of a concrete5 package "
            "repository. Handle and version are read from controller.php."
        )
    )
    return parser.parse_args(argv)


def run(root_dir: Path) -> int:
    """Build the release for ``root_dir`` and report the outcome."""
    try:
        path = build_release(root_dir)
    except Exception as exc:
        print(str(exc).strip(), file=sys.stderr)
        return 1
    print(path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parse_args(argv)
    root_dir = find_repository_root(Path.cwd())
    logger.info("Building release", root=str(root_dir))
    return run(root_dir)


if __name__ == "__main__":
    raise SystemExit(main())
