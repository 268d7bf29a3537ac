from __future__ import annotations

from pathlib import Path

from urel.release.mode import detect_mode, mode_banner
from urel.release.model import ReleaseMode


def test_marker_file_selects_template(tmp_path: Path) -> None:
    (tmp_path / ".template").write_text("", encoding="utf-8")
    assert detect_mode(tmp_path) is ReleaseMode.TEMPLATE


def test_marker_directory_selects_template(tmp_path: Path) -> None:
    (tmp_path / ".template").mkdir()
    assert detect_mode(tmp_path) is ReleaseMode.TEMPLATE


def test_marker_content_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".template").write_text("package\n", encoding="utf-8")
    assert detect_mode(tmp_path) is ReleaseMode.TEMPLATE


def test_missing_marker_selects_package(tmp_path: Path) -> None:
    assert detect_mode(tmp_path) is ReleaseMode.PACKAGE


def test_marker_in_subdirectory_does_not_count(tmp_path: Path) -> None:
    (tmp_path / "com.acme.tools").mkdir()
    (tmp_path / "com.acme.tools" / ".template").write_text("", encoding="utf-8")
    assert detect_mode(tmp_path) is ReleaseMode.PACKAGE


def test_custom_marker(tmp_path: Path) -> None:
    (tmp_path / ".template").write_text("", encoding="utf-8")
    assert detect_mode(tmp_path, marker=".is-template") is ReleaseMode.PACKAGE

    (tmp_path / ".is-template").write_text("", encoding="utf-8")
    assert detect_mode(tmp_path, marker=".is-template") is ReleaseMode.TEMPLATE


def test_banner() -> None:
    assert mode_banner(ReleaseMode.TEMPLATE) == "Semantic-release running in TEMPLATE mode"
    assert mode_banner(ReleaseMode.PACKAGE) == "Semantic-release running in PACKAGE mode"
