"""
pkg_release.archive — Export HEAD to a zip archive and strip unwanted files.

Archive layout:
    <root_dir>/<handle>-<version>.zip
        <handle>/...            every file tracked at HEAD
    minus <handle>/<path> for each path in CLEANUP_FILES
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pkg_release.config import ToolConfig
from pkg_release.log import logger
from pkg_release.models import CLEANUP_FILES, PackageInfo
from pkg_release.tools import run_tool


def export_zip(root_dir: Path, package_info: PackageInfo, config: ToolConfig | None = None) -> Path:
    """Write a zip of HEAD, rooted under <handle>/, and return its path."""
    cfg = config or ToolConfig.from_env()
    # git runs inside root_dir, so a relative --output would be resolved twice.
    root_dir = root_dir.resolve()
    path = root_dir / package_info.archive_name
    logger.info("Exporting archive", path=str(path), handle=package_info.handle)
    run_tool(
        [
            cfg.git_bin,
            "archive",
            "--format=zip",
            f"--prefix={package_info.archive_prefix}",
            f"--output={path}",
            "HEAD",
        ],
        cwd=root_dir,
    )
    return path


def cleanup_zip(
    path: Path,
    package_info: PackageInfo,
    cleanup_files: Sequence[str] = CLEANUP_FILES,
    config: ToolConfig | None = None,
) -> None:
    """Delete the cleanup entries from the archive in place.

    Entries missing from the archive are left to zip to report.
    """
    if not cleanup_files:
        return
    cfg = config or ToolConfig.from_env()
    entries = [package_info.archive_entry(relative) for relative in cleanup_files]
    logger.info("Removing files from archive", path=str(path), entries=entries)
    run_tool([cfg.zip_bin, "-d", str(path), *entries])
