from __future__ import annotations

from typing import NoReturn

import typer

from urel.core.errors import ErrorCode
from urel.output.console import ConsoleProtocol, Style
from urel.release.errors import ReleaseError


def exit_with(
    console: ConsoleProtocol,
    message: str,
    *,
    code: ErrorCode,
    hint: str | None = None,
) -> NoReturn:
    console.error(message)
    if hint:
        console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(code))


def release_error_code(error: ReleaseError) -> ErrorCode:
    if error.kind == "io_failed":
        return ErrorCode.IO_ERROR
    if error.kind == "invalid_base":
        return ErrorCode.ENV_ERROR
    return ErrorCode.USER_ERROR


def exit_release(console: ConsoleProtocol, error: ReleaseError) -> NoReturn:
    exit_with(console, error.message, code=release_error_code(error), hint=error.hint)
