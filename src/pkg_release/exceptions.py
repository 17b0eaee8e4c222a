"""
pkg_release.exceptions — Error hierarchy for release packaging.

Every failure in the pipeline is terminal. The CLI prints the message of any
PackagingError to stderr and exits with status 1.
"""

from __future__ import annotations


class PackagingError(RuntimeError):
    """Base class for release packaging errors."""


class ExecutionEnvironmentError(PackagingError):
    """Raised when the process or the repository is not fit for packaging.

    Covers an embedded interpreter, missing git/zip executables, a directory
    that is not a git working copy, and a working copy with pending changes.
    """


class ManifestNotFoundError(PackagingError):
    """Raised when controller.php does not exist."""


class ManifestReadError(PackagingError):
    """Raised when controller.php cannot be read or is empty."""


class ManifestFormatError(PackagingError):
    """Raised when controller.php does not have the expected token shape."""


class ExternalToolError(PackagingError):
    """
    Raised when git or zip exits with a non-zero status.

    Attributes:
        command:    The exact argv that was invoked.
        returncode: Exit status of the process.
        output:     Combined stdout/stderr captured from the process.
    """

    def __init__(self, *, command: list[str], returncode: int, output: str) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        message = f"Command failed ({returncode}): {' '.join(self.command)}"
        if output.strip():
            message = f"{message}\n{output.strip()}"
        super().__init__(message)
