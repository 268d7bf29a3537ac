"""Filesystem helpers."""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

__all__ = ["atomic_write_text", "dump_json", "write_json"]


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace.

    Symlinks are written through to their target, and an existing file keeps
    its permission bits; a new file gets the usual 0o666 minus umask.

    The parent directory must already exist: a missing package directory means
    the manifest is missing too, and that must not be papered over.
    """
    target = path.resolve()
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.",
        suffix=".tmp",
        dir=str(target.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if target.exists():
            shutil.copymode(target, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, target)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def dump_json(data: object) -> str:
    """Serialize with 2-space indentation plus a trailing newline.

    Key order is kept and non-ASCII characters are written as-is, as
    ``JSON.stringify(data, null, 2)`` does for strings, objects and arrays.
    Floats use Python's formatting: ``1.0`` stays ``1.0`` where Node would
    write ``1``.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_json(path: Path, data: object) -> None:
    atomic_write_text(path, dump_json(data))
