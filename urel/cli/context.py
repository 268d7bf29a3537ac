from __future__ import annotations

from dataclasses import dataclass

from urel.cli.common import exit_with
from urel.core.config import Settings, load_settings_or_default
from urel.core.errors import ErrorCode
from urel.core.repo import Repo, detect_repo
from urel.core.result import Err
from urel.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo: Repo
    settings: Settings
    console: ConsoleProtocol


def build_context() -> CLIContext:
    """Resolve the repository root and urel.toml once for a command."""
    console = RichConsole()

    repo_result = detect_repo()
    if isinstance(repo_result, Err):
        exit_with(console, repo_result.error.message, code=ErrorCode.ENV_ERROR)
    repo = repo_result.value

    settings_result = load_settings_or_default(repo.config_path)
    if isinstance(settings_result, Err):
        exit_with(console, settings_result.error.message, code=ErrorCode.ENV_ERROR)

    return CLIContext(repo=repo, settings=settings_result.value, console=console)
