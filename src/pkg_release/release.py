"""
pkg_release.release — End-to-end release build.

Steps, strictly in order and without retries:
    1. execution context + clean repository checks
    2. read handle/version from controller.php
    3. git archive HEAD to <handle>-<version>.zip
    4. zip -d the cleanup files (archive is deleted if this fails)
"""

from __future__ import annotations

from pathlib import Path

from pkg_release.archive import cleanup_zip, export_zip
from pkg_release.config import ToolConfig
from pkg_release.log import logger
from pkg_release.manifest import read_package_info
from pkg_release.preconditions import check_clean_repository, check_execution_context


def build_release(root_dir: Path, config: ToolConfig | None = None) -> Path:
    """Build the release archive for the package at ``root_dir``; returns its path."""
    cfg = config or ToolConfig.from_env()
    root_dir = root_dir.resolve()

    check_execution_context(cfg)
    check_clean_repository(root_dir, cfg)
    package_info = read_package_info(root_dir)

    path = export_zip(root_dir, package_info, cfg)
    try:
        cleanup_zip(path, package_info, config=cfg)
    except Exception:
        _discard_archive(path)
        raise

    logger.info("Release archive ready", path=str(path))
    return path


def _discard_archive(path: Path) -> None:
    """Delete a partially built archive; failures are logged, never raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Failed to delete partial archive", path=str(path), error=str(exc))
