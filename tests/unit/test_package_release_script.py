"""Unit tests for scripts/package_release.py."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Any

import pytest
from conftest import requires_tools
from pkg_release.log import logger


def _load_package_release_module() -> Any:
    repo_root = Path(__file__).resolve().parents[2]
    spec = importlib.util.spec_from_file_location(
        "package_release_script", repo_root / "scripts" / "package_release.py"
    )
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)  # type: ignore[union-attr]
    return module


package_release: Any = _load_package_release_module()


def test_repo_root_is_parent_of_scripts_dir() -> None:
    assert package_release.REPO_ROOT == Path(__file__).resolve().parents[2]


def test_parse_args_has_no_options() -> None:
    package_release.parse_args([])
    with pytest.raises(SystemExit):
        package_release.parse_args(["extra"])


@requires_tools
def test_main_builds_archive_for_repo_root(
    package_repo: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(package_release, "REPO_ROOT", package_repo)

    assert package_release.main([]) == 0
    assert capsys.readouterr().out.strip() == str(package_repo / "foo-1.2.3.zip")


def test_main_returns_1_when_manifest_is_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(package_release, "REPO_ROOT", tmp_path)
    monkeypatch.setattr("pkg_release.release.check_execution_context", lambda _cfg: None)
    monkeypatch.setattr("pkg_release.release.check_clean_repository", lambda _root, _cfg: None)

    assert package_release.main([]) == 1
    assert "Unable to find the file" in capsys.readouterr().err


def test_script_logs_through_the_package_logger() -> None:
    assert package_release.logger is logger
