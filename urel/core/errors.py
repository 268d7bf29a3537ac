"""Error codes for CLI exit status.

The values are used as process exit codes by the release runner and must
remain stable:
- 0: Success
- 1: User error (bad version argument, malformed manifest)
- 2: Environment error (invalid urel.toml or base configuration, unusable root)
- 5: I/O error (manifest missing, unreadable or not writable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for urel commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
