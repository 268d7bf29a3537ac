"""Result type for explicit error handling.

Services in urel never raise for expected failures (missing manifest,
malformed JSON, invalid urel.toml). They return either ``Ok(value)`` or
``Err(error)`` and the CLI layer decides how to report it and which exit code
to use.

Usage:
    result = write_manifest_version(path=path, version="1.2.0")
    if isinstance(result, Err):
        exit_release(console, result.error)
    previous = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying ``error``."""

    error: E


Result = Union[Ok[T], Err[E]]
