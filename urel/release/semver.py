from __future__ import annotations

import re
from dataclasses import dataclass

from urel.core.result import Err, Ok, Result
from urel.release.errors import ReleaseError

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            out += f"-{self.prerelease}"
        if self.build:
            out += f"+{self.build}"
        return out


def parse_version(version: str) -> SemVer | None:
    m = _SEMVER_RE.fullmatch(version)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4), m.group(5))


def require_version(version: str) -> Result[SemVer, ReleaseError]:
    parsed = parse_version(version)
    if parsed is None:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=f"not a semantic version: {version!r}",
                hint="expected MAJOR.MINOR.PATCH, e.g. 1.4.0 or 2.0.0-beta.1",
            )
        )
    return Ok(parsed)
