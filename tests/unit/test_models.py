"""
tests/unit/test_models.py — PackageInfo and packaging constants.
"""

import dataclasses

import pytest
from pkg_release.exceptions import ExternalToolError, ManifestFormatError, PackagingError
from pkg_release.models import CLEANUP_FILES, MANIFEST_FILENAME, PackageInfo


class TestConstants:
    def test_manifest_is_controller_php(self):
        assert MANIFEST_FILENAME == "controller.php"

    def test_cleanup_files(self):
        assert CLEANUP_FILES == ("composer.json", "LICENSE.TXT")


class TestPackageInfo:
    def test_archive_name_and_prefix(self):
        info = PackageInfo(handle="foo", version="1.2.3")
        assert info.archive_name == "foo-1.2.3.zip"
        assert info.archive_prefix == "foo/"

    def test_archive_entry_uses_forward_slashes(self):
        info = PackageInfo(handle="foo", version="1.0")
        assert info.archive_entry("composer.json") == "foo/composer.json"
        assert info.archive_entry("docs\\LICENSE.TXT") == "foo/docs/LICENSE.TXT"
        assert info.archive_entry("/README.md") == "foo/README.md"

    def test_is_frozen(self):
        info = PackageInfo(handle="foo", version="1.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.handle = "bar"  # type: ignore[misc]

    @pytest.mark.parametrize(("handle", "version"), [("", "1.0"), ("foo", "")])
    def test_empty_values_rejected(self, handle, version):
        with pytest.raises(ManifestFormatError, match="must not be empty"):
            PackageInfo(handle=handle, version=version)


class TestExternalToolError:
    def test_message_contains_command_and_output(self):
        exc = ExternalToolError(
            command=["zip", "-d", "a.zip", "foo/x"], returncode=12, output="\nnothing to do\n"
        )
        assert isinstance(exc, PackagingError)
        assert exc.returncode == 12
        assert exc.command == ["zip", "-d", "a.zip", "foo/x"]
        assert str(exc) == "Command failed (12): zip -d a.zip foo/x\nnothing to do"

    def test_message_without_output(self):
        exc = ExternalToolError(command=["git", "status"], returncode=128, output="  ")
        assert str(exc) == "Command failed (128): git status"
