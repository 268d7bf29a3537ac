"""set-version command - write the release version into the Unity manifest."""

from __future__ import annotations

import typer

from urel.cli.common import exit_release
from urel.cli.context import build_context
from urel.core.result import Err
from urel.release.manifest import manifest_path, write_manifest_version
from urel.release.semver import require_version


def set_version(
    version: str = typer.Argument(..., help="Version to write, e.g. 1.4.0"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject versions that are not MAJOR.MINOR.PATCH[-pre][+build].",
    ),
) -> None:
    """Set `version` in <namespace>/package.json (run by the exec release step)."""
    ctx = build_context()

    if strict:
        checked = require_version(version)
        if isinstance(checked, Err):
            exit_release(ctx.console, checked.error)

    path = manifest_path(ctx.repo.root, ctx.settings.package.namespace)
    result = write_manifest_version(path=path, version=version)
    if isinstance(result, Err):
        exit_release(ctx.console, result.error)

    ctx.console.print(f"Updated Unity package.json to version {version}")
