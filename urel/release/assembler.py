from __future__ import annotations

from urel.core.config import DEFAULT_NAMESPACE, DEFAULT_VERSION_COMMAND
from urel.release.model import ReleaseConfiguration, ReleaseMode
from urel.release.plugins import package_plugins, template_plugins


def assemble_config(
    mode: ReleaseMode,
    base: ReleaseConfiguration,
    *,
    namespace: str = DEFAULT_NAMESPACE,
    version_command: str = DEFAULT_VERSION_COMMAND,
) -> ReleaseConfiguration:
    """Append the plugins for ``mode`` to ``base`` and return the result.

    ``base`` is left as is; its plugins keep their order and come first.
    """
    match mode:
        case ReleaseMode.TEMPLATE:
            return base.with_plugins(template_plugins())
        case ReleaseMode.PACKAGE:
            return base.with_plugins(
                package_plugins(namespace=namespace, version_command=version_command)
            )
