# /clerk/__init__.py

"""
Clerk JSON Persistence Package

Small helpers for keeping game data in JSON:
- Write and read JSON files with pretty-printed output
- Read JSON shipped as packaged resources (folder or Qt resource system)
- "try" variants that log failures and fall back to defaults
- Environment-driven configuration and logging setup
"""

from .errors import (
    ClerkError,
    JsonDecodeError,
    JsonEncodeError,
    JsonFileNotFoundError,
    ReadOnlyResourceError,
)
from .json_file import (
    read_json_file,
    read_json_resource,
    try_read_json_file,
    try_read_json_resource,
    try_write_json_file,
    write_json_file,
    write_json_resource,
)

__all__ = [
    "ClerkError",
    "JsonDecodeError",
    "JsonEncodeError",
    "JsonFileNotFoundError",
    "ReadOnlyResourceError",
    "read_json_file",
    "read_json_resource",
    "try_read_json_file",
    "try_read_json_resource",
    "try_write_json_file",
    "write_json_file",
    "write_json_resource",
]
