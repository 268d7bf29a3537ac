"""Base (shared) release configuration.

Repositories either point ``release.base`` in urel.toml at a JSON file
holding a semantic-release configuration, or get the built-in
conventional-commits preset.
"""

from __future__ import annotations

import json
from pathlib import Path

from urel.core.result import Err, Ok, Result
from urel.core.structured import as_obj_list, as_str_dict
from urel.release.errors import ReleaseError
from urel.release.model import PluginDescriptor, ReleaseConfiguration

COMMIT_ANALYZER = "@semantic-release/commit-analyzer"
RELEASE_NOTES_GENERATOR = "@semantic-release/release-notes-generator"
CONVENTIONAL_COMMITS = "conventionalcommits"


def default_base() -> ReleaseConfiguration:
    """Conventional-commits preset: analyze commits, then generate notes."""
    return ReleaseConfiguration(
        plugins=(
            (COMMIT_ANALYZER, {"preset": CONVENTIONAL_COMMITS}),
            (RELEASE_NOTES_GENERATOR, {"preset": CONVENTIONAL_COMMITS}),
        ),
    )


def _invalid(message: str, *, source: str) -> Err[ReleaseError]:
    return Err(ReleaseError(kind="invalid_base", message=message, hint=source))


def _parse_descriptor(item: object, *, index: int, source: str) -> Result[PluginDescriptor, ReleaseError]:
    if isinstance(item, str) and item:
        return Ok(item)

    parts = as_obj_list(item)
    if parts is None or not 1 <= len(parts) <= 2 or not isinstance(parts[0], str):
        return _invalid(f"plugins[{index}] must be a plugin name or [name, options]", source=source)

    name = parts[0]
    if len(parts) == 1:
        return Ok(name)

    options = as_str_dict(parts[1])
    if options is None:
        return _invalid(f"plugins[{index}] options must be an object", source=source)
    return Ok((name, options))


def parse_release_config(data: object, *, source: str) -> Result[ReleaseConfiguration, ReleaseError]:
    root = as_str_dict(data)
    if root is None:
        return _invalid("base configuration must be a JSON object", source=source)

    raw_plugins = root.get("plugins", [])
    items = as_obj_list(raw_plugins)
    if items is None:
        return _invalid("base configuration 'plugins' must be a list", source=source)

    plugins: list[PluginDescriptor] = []
    for index, item in enumerate(items):
        parsed = _parse_descriptor(item, index=index, source=source)
        if isinstance(parsed, Err):
            return parsed
        plugins.append(parsed.value)

    extra = {k: v for k, v in root.items() if k != "plugins"}
    return Ok(ReleaseConfiguration(plugins=tuple(plugins), extra=extra))


def load_base_config(path: Path) -> Result[ReleaseConfiguration, ReleaseError]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to read base configuration {path.name}: {e}",
                hint=str(path),
            )
        )
    except UnicodeDecodeError as e:
        return _invalid(f"{path.name} is not valid UTF-8: {e}", source=str(path))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return _invalid(f"invalid JSON in {path.name}: {e}", source=str(path))

    return parse_release_config(obj, source=str(path))


def resolve_base(*, root: Path, base: str | None) -> Result[ReleaseConfiguration, ReleaseError]:
    """Load ``base`` relative to ``root``, or the built-in preset when unset."""
    if base is None:
        return Ok(default_base())
    return load_base_config(root / base)
