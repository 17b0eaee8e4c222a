"""Unit tests for pkg_release.cli."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import requires_tools
from pkg_release import cli


def test_parse_args_accepts_no_arguments() -> None:
    cli.parse_args([])


def test_parse_args_rejects_unknown_arguments() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["--root", "/tmp"])


def test_find_repository_root_walks_up_to_controller(tmp_path: Path) -> None:
    (tmp_path / "controller.php").write_text("<?php\n", encoding="utf-8")
    nested = tmp_path / "blocks" / "foo" / "templates"
    nested.mkdir(parents=True)
    assert cli.find_repository_root(nested) == tmp_path.resolve()


def test_find_repository_root_falls_back_to_start(tmp_path: Path) -> None:
    start = tmp_path / "empty"
    start.mkdir()
    assert cli.find_repository_root(start) == start.resolve()


@requires_tools
def test_main_prints_archive_path(
    package_repo: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(package_repo / "src")

    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert out.strip() == str(package_repo.resolve() / "foo-1.2.3.zip")


@requires_tools
def test_main_reports_errors_on_stderr(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    assert cli.main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "is not a git repository" in captured.err
