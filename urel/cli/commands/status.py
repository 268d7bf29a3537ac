"""status command - show what `urel config` and `urel set-version` would act on."""

from __future__ import annotations

from urel.cli.common import exit_release
from urel.cli.context import build_context
from urel.core.result import Err
from urel.output.console import Style
from urel.release.manifest import manifest_path, read_manifest_version
from urel.release.mode import detect_mode
from urel.release.model import ReleaseMode


def status() -> None:
    """Show repository root, release mode and current package version."""
    ctx = build_context()
    console = ctx.console
    root = ctx.repo.root
    namespace = ctx.settings.package.namespace

    mode = detect_mode(root, marker=ctx.settings.package.marker)
    console.print(f"root: {root} ({ctx.repo.source})")
    console.print(f"mode: {mode.label}")
    console.print(f"namespace: {namespace}")

    if mode is ReleaseMode.TEMPLATE:
        console.print("version: n/a (template repository)", Style.DIM)
        return

    current = read_manifest_version(path=manifest_path(root, namespace))
    if isinstance(current, Err):
        exit_release(console, current.error)

    if current.value is None:
        console.warning(f"{namespace}/package.json has no version")
        return
    console.print(f"version: {current.value}")
