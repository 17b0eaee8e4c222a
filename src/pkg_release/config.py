"""
pkg_release.config — External tool locations.

Executables can be overridden through the environment:
    PKG_RELEASE_GIT   git executable (default: git)
    PKG_RELEASE_ZIP   zip executable (default: zip)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_GIT_BIN = "git"
DEFAULT_ZIP_BIN = "zip"


@dataclass(frozen=True)
class ToolConfig:
    git_bin: str = DEFAULT_GIT_BIN
    zip_bin: str = DEFAULT_ZIP_BIN

    @classmethod
    def from_env(cls) -> ToolConfig:
        git_bin = os.environ.get("PKG_RELEASE_GIT", "").strip() or DEFAULT_GIT_BIN
        zip_bin = os.environ.get("PKG_RELEASE_ZIP", "").strip() or DEFAULT_ZIP_BIN
        return cls(git_bin=git_bin, zip_bin=zip_bin)
