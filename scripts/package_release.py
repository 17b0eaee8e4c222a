#!/usr/bin/env python3
"""
package_release.py — Build the release zip of the package this script lives in.

Reads $pkgHandle and $pkgVersion from controller.php in the repository root
(the parent of scripts/), exports HEAD to <handle>-<version>.zip and removes
composer.json and LICENSE.TXT from it.

The working copy must be clean: nothing staged, modified or untracked.

Exit codes:
    0  Archive built; its path is printed on stdout
    1  Any failure; the error is printed on stderr

Usage:
    python scripts/package_release.py
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pkg_release.cli import run
from pkg_release.log import logger

REPO_ROOT = Path(__file__).resolve().parents[1]

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Build <handle>-<version>.zip from HEAD of this package repository"
    )
    return parser.parse_args(argv)

def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parse_args(argv)
    logger.info("Packaging", root=str(REPO_ROOT))
    return run(REPO_ROOT)

if __name__ == "__main__":
    raise SystemExit(main())
