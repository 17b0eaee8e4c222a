"""
pkg_release.preconditions — Checks run before anything is written.

A release is only ever built from a committed state: the archive is produced
from HEAD, so pending local changes would silently be left out of it.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from pkg_release.config import ToolConfig
from pkg_release.exceptions import ExecutionEnvironmentError
from pkg_release.log import logger
from pkg_release.tools import run_tool


def check_execution_context(config: ToolConfig | None = None) -> None:
    """Fail unless running as a standalone interpreter with git and zip available."""
    cfg = config or ToolConfig.from_env()
    if not sys.executable:
        raise ExecutionEnvironmentError("Must be run from a standalone Python interpreter")
    for binary in (cfg.git_bin, cfg.zip_bin):
        if shutil.which(binary) is None:
            raise ExecutionEnvironmentError(f"Required executable not found in PATH: {binary}")


def check_clean_repository(root_dir: Path, config: ToolConfig | None = None) -> None:
    """Fail unless ``root_dir`` is a git working copy without pending changes.

    Staged, unstaged and untracked files all count as pending changes.
    """
    cfg = config or ToolConfig.from_env()
    # .git is a file instead of a directory in linked worktrees.
    if not (root_dir / ".git").exists():
        raise ExecutionEnvironmentError(f"The directory {root_dir} is not a git repository")

    output = run_tool(
        [cfg.git_bin, "status", "--porcelain", "--untracked-files=all"],
        cwd=root_dir,
    )
    changes = [line for line in output.splitlines() if line.strip()]
    if changes:
        listing = "\n".join(f"  {line}" for line in changes)
        raise ExecutionEnvironmentError(
            f"The repository at {root_dir} has uncommitted changes:\n{listing}"
        )
    logger.debug("Repository is clean", path=str(root_dir))
