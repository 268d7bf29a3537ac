"""Platform abstraction layer."""

from .files import atomic_write_text, dump_json, write_json

__all__ = [
    "atomic_write_text",
    "dump_json",
    "write_json",
]
