"""Typed loading of the optional ``urel.toml`` project file.

Example:

    [package]
    namespace = "com.example.tools"
    marker = ".template"

    [release]
    base = "release.base.json"
    version_command = "urel set-version"
    output = ".releaserc.json"

Every key is optional; a repository without urel.toml uses the defaults below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_MARKER",
    "DEFAULT_NAMESPACE",
    "DEFAULT_OUTPUT",
    "DEFAULT_VERSION_COMMAND",
    "ConfigError",
    "PackageSettings",
    "ReleaseSettings",
    "Settings",
    "load_settings",
    "load_settings_or_default",
]

CONFIG_FILE_NAME = "urel.toml"

# Template repositories carry this placeholder until they are instantiated.
DEFAULT_NAMESPACE = "__NAMESPACE__"
DEFAULT_MARKER = ".template"
DEFAULT_VERSION_COMMAND = "urel set-version"
DEFAULT_OUTPUT = ".releaserc.json"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when urel.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PackageSettings:
    """Where the Unity package lives inside the repository."""

    namespace: str = DEFAULT_NAMESPACE
    marker: str = DEFAULT_MARKER


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """How the release configuration is produced.

    ``base`` is a path relative to the repository root; None selects the
    built-in conventional-commits preset.
    """

    base: str | None = None
    version_command: str = DEFAULT_VERSION_COMMAND
    output: str = DEFAULT_OUTPUT


def _single_name(value: str, *, key: str) -> str:
    """Entries resolved against the repository root must stay directly under it."""
    if "/" in value or "\\" in value or value in {".", ".."}:
        raise ValueError(f"{key} must be a single directory entry name: {value}")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    package: PackageSettings = field(default_factory=PackageSettings)
    release: ReleaseSettings = field(default_factory=ReleaseSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a mapping (parsed TOML)."""
        package: StrDict = get_table(data, "package") or {}
        release: StrDict = get_table(data, "release") or {}

        namespace = _single_name(
            get_str(package, "namespace") or DEFAULT_NAMESPACE, key="package.namespace"
        )
        marker = _single_name(get_str(package, "marker") or DEFAULT_MARKER, key="package.marker")

        return cls(
            package=PackageSettings(
                namespace=namespace,
                marker=marker,
            ),
            release=ReleaseSettings(
                base=get_str(release, "base"),
                version_command=get_str(release, "version_command") or DEFAULT_VERSION_COMMAND,
                output=get_str(release, "output") or DEFAULT_OUTPUT,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_settings(path: Path) -> Result[Settings, ConfigError]:
    """Load and validate urel.toml.

    Returns:
        Ok(Settings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Settings.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_settings_or_default(path: Path) -> Result[Settings, ConfigError]:
    """Like load_settings, but a missing file yields the default Settings.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Settings())
    return load_settings(path)
