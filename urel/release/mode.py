from __future__ import annotations

from pathlib import Path

from urel.core.config import DEFAULT_MARKER
from urel.release.model import ReleaseMode


def detect_mode(root: Path, *, marker: str = DEFAULT_MARKER) -> ReleaseMode:
    """TEMPLATE when the marker entry exists at ``root``, PACKAGE otherwise.

    Only existence matters: the marker may be a file or a directory, and its
    content is never read.
    """
    if (root / marker).exists():
        return ReleaseMode.TEMPLATE
    return ReleaseMode.PACKAGE


def mode_banner(mode: ReleaseMode) -> str:
    return f"Semantic-release running in {mode.label} mode"
