"""
pkg_release — Release archives for concrete5 packages.

Reads $pkgHandle/$pkgVersion from controller.php, exports HEAD of a clean git
checkout to <handle>-<version>.zip and strips files that must not ship.
"""

from pkg_release.exceptions import (
    ExecutionEnvironmentError,
    ExternalToolError,
    ManifestFormatError,
    ManifestNotFoundError,
    ManifestReadError,
    PackagingError,
)
from pkg_release.models import CLEANUP_FILES, PackageInfo
from pkg_release.release import build_release

__all__ = [
    "CLEANUP_FILES",
    "ExecutionEnvironmentError",
    "ExternalToolError",
    "ManifestFormatError",
    "ManifestNotFoundError",
    "ManifestReadError",
    "PackageInfo",
    "PackagingError",
    "build_release",
]
