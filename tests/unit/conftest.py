"""Shared fixtures: a throwaway concrete5 package repository under tmp_path."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

CONTROLLER_PHP = """<?php
namespace Concrete\\Package\\Foo;

use Concrete\\Core\\Package\\Package;

defined('C5_EXECUTE') or die('Access Denied.');

class Controller extends Package
{
    protected $appVersionRequired = '8.5.0';
    protected $pkgHandle = 'foo';
    protected $pkgVersion = '1.2.3';

    public function getPackageName()
    {
        return t('Foo');
    }
}
"""

requires_tools = pytest.mark.skipif(
    shutil.which("git") is None or shutil.which("zip") is None,
    reason="git and zip executables are required",
)


def git(root: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Release Test",
            "-c",
            "user.email=release-test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=root,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture(autouse=True)
def tool_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never pick up executable overrides from the outer environment."""
    monkeypatch.delenv("PKG_RELEASE_GIT", raising=False)
    monkeypatch.delenv("PKG_RELEASE_ZIP", raising=False)


@pytest.fixture
def package_repo(tmp_path: Path) -> Path:
    """A committed, clean package repository with handle foo and version 1.2.3."""
    root = tmp_path / "foo"
    (root / "src").mkdir(parents=True)
    (root / "controller.php").write_text(CONTROLLER_PHP, encoding="utf-8")
    (root / "composer.json").write_text('{"name": "acme/foo"}\n', encoding="utf-8")
    (root / "LICENSE.TXT").write_text("MIT License\n", encoding="utf-8")
    (root / "README.md").write_text("# Foo\n", encoding="utf-8")
    (root / "src" / "Thing.php").write_text("<?php\nclass Thing {}\n", encoding="utf-8")

    git(root, "init", "-q")
    git(root, "add", "-A")
    git(root, "commit", "-q", "-m", "Initial commit")
    return root
