"""Tests for urel.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from urel.core.config import (
    DEFAULT_MARKER,
    DEFAULT_NAMESPACE,
    DEFAULT_OUTPUT,
    DEFAULT_VERSION_COMMAND,
    ConfigError,
    Settings,
    load_settings,
    load_settings_or_default,
)
from urel.core.result import Err, Ok


class TestSettingsDefaults:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.package.namespace == DEFAULT_NAMESPACE == "__NAMESPACE__"
        assert settings.package.marker == DEFAULT_MARKER == ".template"
        assert settings.release.base is None
        assert settings.release.version_command == DEFAULT_VERSION_COMMAND
        assert settings.release.output == DEFAULT_OUTPUT == ".releaserc.json"

    def test_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.package = None  # type: ignore[misc,assignment]


class TestSettingsFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Settings.from_dict({}) == Settings()

    def test_reads_all_keys(self) -> None:
        settings = Settings.from_dict(
            {
                "package": {"namespace": "com.acme.tools", "marker": ".is-template"},
                "release": {
                    "base": "release.base.json",
                    "version_command": "python -m urel set-version",
                    "output": "build/releaserc.json",
                },
            }
        )
        assert settings.package.namespace == "com.acme.tools"
        assert settings.package.marker == ".is-template"
        assert settings.release.base == "release.base.json"
        assert settings.release.version_command == "python -m urel set-version"
        assert settings.release.output == "build/releaserc.json"

    def test_blank_values_fall_back_to_defaults(self) -> None:
        settings = Settings.from_dict({"package": {"namespace": "  "}, "release": {"base": ""}})
        assert settings.package.namespace == DEFAULT_NAMESPACE
        assert settings.release.base is None

    @pytest.mark.parametrize("marker", ["../x", "sub/.template", "..", "."])
    def test_marker_outside_root_is_rejected(self, marker: str) -> None:
        with pytest.raises(ValueError, match="package.marker"):
            Settings.from_dict({"package": {"marker": marker}})

    def test_nested_namespace_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="single directory entry name"):
            Settings.from_dict({"package": {"namespace": "Packages/com.acme"}})


class TestLoadSettings:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "urel.toml"
        path.write_text('[package]\nnamespace = "com.acme.tools"\n', encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Ok)
        assert result.value.package.namespace == "com.acme.tools"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_settings(tmp_path / "urel.toml")
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "urel.toml"
        path.write_text("[package\nnamespace = ", encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "urel.toml"
        path.write_text('[package]\nnamespace = "../elsewhere"\n', encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message


class TestLoadSettingsOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_settings_or_default(tmp_path / "urel.toml") == Ok(Settings())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "urel.toml"
        path.write_text("not = [valid", encoding="utf-8")
        assert isinstance(load_settings_or_default(path), Err)


def test_load_settings_reports_bad_marker(tmp_path: Path) -> None:
    path = tmp_path / "urel.toml"
    path.write_text('[package]\nmarker = "../.template"\n', encoding="utf-8")

    result = load_settings(path)

    assert isinstance(result, Err)
    assert "package.marker" in result.error.message
