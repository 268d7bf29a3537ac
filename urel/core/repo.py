"""Repository root detection and well-known paths.

The repository root is where the mode marker, urel.toml and the generated
release configuration live. It is resolved once per invocation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .config import CONFIG_FILE_NAME
from .result import Err, Ok, Result

__all__ = [
    "ROOT_ENV_VAR",
    "Repo",
    "RepoError",
    "RepoSource",
    "detect_repo",
    "find_repo_upward",
    "is_repo_root",
]

ROOT_ENV_VAR = "UREL_ROOT"

RepoSource = Literal["option", "env", "cwd", "fallback"]


@dataclass(frozen=True)
class RepoError:
    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Repo:
    """A repository hosting a Unity package."""

    root: Path
    source: RepoSource = "cwd"

    @property
    def config_path(self) -> Path:
        """Path to urel.toml."""
        return self.root / CONFIG_FILE_NAME

    def __str__(self) -> str:
        return str(self.root)


def is_repo_root(path: Path) -> bool:
    """A repository root holds urel.toml or a .git entry (dir or worktree file)."""
    return (path / CONFIG_FILE_NAME).is_file() or (path / ".git").exists()


def find_repo_upward(start: Path) -> Path | None:
    for parent in (start, *start.parents):
        if is_repo_root(parent):
            return parent
    return None


def detect_repo(
    *,
    root: Path | None = None,
    start_dir: Path | None = None,
    env_var: str = ROOT_ENV_VAR,
) -> Result[Repo, RepoError]:
    """Resolve the repository root.

    Detection order:
    1. Explicit ``root`` (the --root option)
    2. ``$UREL_ROOT``
    3. Nearest ancestor of start_dir (or cwd) holding urel.toml or .git
    4. start_dir (or cwd) itself
    """
    if root is not None:
        path = root.expanduser().resolve()
        if not path.is_dir():
            return Err(RepoError(f"--root '{root}' is not a directory", searched_from=None))
        return Ok(Repo(root=path, source="option"))

    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Repo(root=env_path, source="env"))
        return Err(
            RepoError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
                searched_from=None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_repo_upward(search_start)
    if found is not None:
        return Ok(Repo(root=found, source="cwd"))
    return Ok(Repo(root=search_start, source="fallback"))
