"""
pkg_release.models — Package metadata and fixed packaging constants.
"""

from __future__ import annotations

from dataclasses import dataclass

from pkg_release.exceptions import ManifestFormatError

# Manifest read from the repository root.
MANIFEST_FILENAME: str = "controller.php"

HANDLE_PROPERTY: str = "pkgHandle"
VERSION_PROPERTY: str = "pkgVersion"

# Paths stripped from the archive, relative to its <handle>/ root.
CLEANUP_FILES: tuple[str, ...] = (
    "composer.json",
    "LICENSE.TXT",
)


@dataclass(frozen=True)
class PackageInfo:
    """Handle and version of the package being released.

    Both values end up in the archive file name, so empty strings are rejected.
    """

    handle: str
    version: str

    def __post_init__(self) -> None:
        if not self.handle:
            raise ManifestFormatError(f"${HANDLE_PROPERTY} must not be empty")
        if not self.version:
            raise ManifestFormatError(f"${VERSION_PROPERTY} must not be empty")

    @property
    def archive_name(self) -> str:
        return f"{self.handle}-{self.version}.zip"

    @property
    def archive_prefix(self) -> str:
        return f"{self.handle}/"

    def archive_entry(self, relative_path: str) -> str:
        """Return the in-archive path of a file given relative to the package root."""
        return self.archive_prefix + relative_path.replace("\\", "/").lstrip("/")
