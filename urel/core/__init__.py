"""Core types: settings, exit codes, results and repository detection."""

from .config import ConfigError, Settings, load_settings, load_settings_or_default
from .errors import ErrorCode
from .repo import Repo, RepoError, detect_repo
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "Settings",
    "load_settings",
    "load_settings_or_default",
    # errors
    "ErrorCode",
    # repo
    "Repo",
    "RepoError",
    "detect_repo",
    # result
    "Err",
    "Ok",
    "Result",
]
