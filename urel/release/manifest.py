"""Unity package manifest (package.json) version rewriting.

A missing, unreadable or malformed manifest is fatal: the caller stops the
release instead of publishing with a stale version.
"""

from __future__ import annotations

import json
from pathlib import Path

from urel.core.result import Err, Ok, Result
from urel.core.structured import StrDict, as_str_dict, get_str
from urel.platform.files import write_json
from urel.release.errors import ReleaseError
from urel.release.plugins import MANIFEST_FILE


def manifest_path(root: Path, namespace: str) -> Path:
    return root / namespace / MANIFEST_FILE


def _load_manifest(path: Path) -> Result[StrDict, ReleaseError]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )
    except UnicodeDecodeError as e:
        return Err(
            ReleaseError(
                kind="invalid_manifest",
                message=f"{path.name} is not valid UTF-8: {e}",
                hint=str(path),
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            ReleaseError(
                kind="invalid_manifest",
                message=f"invalid JSON in {path.name}: {e}",
                hint=str(path),
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            ReleaseError(
                kind="invalid_manifest",
                message=f"invalid JSON root in {path.name}",
                hint=str(path),
            )
        )
    return Ok(data)


def read_manifest_version(*, path: Path) -> Result[str | None, ReleaseError]:
    """Return the manifest's version, or None when it has none."""
    data = _load_manifest(path)
    if isinstance(data, Err):
        return data
    return Ok(get_str(data.value, "version"))


def write_manifest_version(*, path: Path, version: str) -> Result[str | None, ReleaseError]:
    """Set ``version`` in the manifest at ``path`` and rewrite it.

    Every other field keeps its value and position. The file is always
    rewritten with 2-space indentation and a trailing newline, so applying the
    same version twice leaves identical bytes.

    Returns:
        Ok(previous version, or None if absent) on success.
    """
    loaded = _load_manifest(path)
    if isinstance(loaded, Err):
        return loaded

    data = loaded.value
    previous = get_str(data, "version")
    data["version"] = version

    try:
        write_json(path, data)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(previous)
