"""config command - assemble the semantic-release configuration."""

from __future__ import annotations

from pathlib import Path

import typer

from urel.cli.common import exit_release, exit_with
from urel.cli.context import build_context
from urel.core.errors import ErrorCode
from urel.core.result import Err
from urel.platform.files import atomic_write_text, dump_json
from urel.release.assembler import assemble_config
from urel.release.base import resolve_base
from urel.release.mode import detect_mode, mode_banner

STDOUT = "-"


def config(
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the configuration (default: .releaserc.json, '-' for stdout).",
    ),
) -> None:
    """Detect template/package mode and write the release configuration."""
    ctx = build_context()
    root = ctx.repo.root
    settings = ctx.settings

    mode = detect_mode(root, marker=settings.package.marker)
    target = output or settings.release.output

    # Keep stdout parseable when the JSON itself goes there.
    if target == STDOUT:
        typer.echo(mode_banner(mode), err=True)
    else:
        ctx.console.print(mode_banner(mode))

    base = resolve_base(root=root, base=settings.release.base)
    if isinstance(base, Err):
        exit_release(ctx.console, base.error)

    assembled = assemble_config(
        mode,
        base.value,
        namespace=settings.package.namespace,
        version_command=settings.release.version_command,
    )
    payload = dump_json(assembled.to_json())

    if target == STDOUT:
        typer.echo(payload, nl=False)
        return

    path = Path(target)
    if not path.is_absolute():
        path = root / path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write_text(path, payload)
    except OSError as e:
        exit_with(ctx.console, f"failed to write {path}: {e}", code=ErrorCode.IO_ERROR)

    ctx.console.success(f"wrote {path}")
