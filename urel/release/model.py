from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

PluginOptions = Mapping[str, object]
# A bare plugin id, or (id, options) as semantic-release accepts them.
PluginDescriptor = str | tuple[str, PluginOptions]


class ReleaseMode(Enum):
    TEMPLATE = "template"
    PACKAGE = "package"

    @property
    def label(self) -> str:
        return self.name


def plugin_id(descriptor: PluginDescriptor) -> str:
    if isinstance(descriptor, str):
        return descriptor
    return descriptor[0]


def descriptor_to_json(descriptor: PluginDescriptor) -> object:
    if isinstance(descriptor, str):
        return descriptor
    name, options = descriptor
    return [name, dict(options)]


def _empty_extra() -> dict[str, object]:
    return {}


@dataclass(frozen=True, slots=True)
class ReleaseConfiguration:
    """A semantic-release configuration.

    ``plugins`` is ordered and executed in order by the runner. ``extra`` holds
    every other top-level key of the base configuration (``branches``,
    ``tagFormat``...) and is passed through untouched.
    """

    plugins: tuple[PluginDescriptor, ...] = ()
    extra: Mapping[str, object] = field(default_factory=_empty_extra)

    def with_plugins(self, plugins: Iterable[PluginDescriptor]) -> ReleaseConfiguration:
        """Return a new configuration with ``plugins`` appended after the current ones."""
        return ReleaseConfiguration(plugins=self.plugins + tuple(plugins), extra=self.extra)

    @property
    def plugin_ids(self) -> list[str]:
        return [plugin_id(p) for p in self.plugins]

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {k: v for k, v in self.extra.items() if k != "plugins"}
        out["plugins"] = [descriptor_to_json(p) for p in self.plugins]
        return out
