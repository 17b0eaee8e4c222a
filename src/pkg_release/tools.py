"""
pkg_release.tools — Blocking invocation of external command-line tools.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from pkg_release.exceptions import ExternalToolError
from pkg_release.log import logger


def run_tool(command: list[str], *, cwd: Path | None = None) -> str:
    """Run a command to completion and return its combined stdout/stderr.

    Raises ExternalToolError on a non-zero exit status. A missing executable
    is reported the same way, with the OS error as output.
    """
    cmd_display = " ".join(command)
    logger.debug("Running command", command=cmd_display, cwd=str(cwd) if cwd else None)
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as exc:
        raise ExternalToolError(command=command, returncode=127, output=str(exc)) from exc

    if result.returncode != 0:
        raise ExternalToolError(
            command=command,
            returncode=result.returncode,
            output=result.stdout or "",
        )
    return result.stdout or ""
