# /clerk/config.py

# Centralized configuration for clerk. Values are environment-driven,
# with safe defaults. Import and use wherever needed.
#
# Example env:
#   CLERK_RESOURCES_DIR=/abs/path/to/Resources
#   CLERK_JSON_INDENT=4
#   CLERK_ENCODING=utf-8
#   CLERK_ENSURE_ASCII=0
#   CLERK_CREATE_DIRS=1
#   CLERK_LOG_LEVEL=INFO
#   CLERK_LOG_FILE=clerk.log
#   CLERK_LOG_JSON=0

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


__all__ = ["Config", "load"]

DEFAULT_RESOURCES_DIR = "Resources"


def _parse_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    v = val.strip().lower()
    return v in ("1", "true", "yes", "on")


def _parse_int(env: str, default: int) -> int:
    try:
        return int(os.getenv(env, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Config:
    # Resources
    resources_dir: Path = field(default_factory=lambda: Path(DEFAULT_RESOURCES_DIR))

    # JSON output
    indent: int = 2  # 0 or less writes compact single-line JSON
    encoding: str = "utf-8"
    ensure_ascii: bool = False
    create_dirs: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False

    @property
    def json_indent(self) -> Optional[int]:
        return self.indent if self.indent > 0 else None


def load() -> Config:
    resources_str = os.getenv("CLERK_RESOURCES_DIR", "").strip()
    resources_dir = Path(resources_str) if resources_str else Path(DEFAULT_RESOURCES_DIR)

    return Config(
        resources_dir=resources_dir,
        indent=_parse_int("CLERK_JSON_INDENT", 2),
        encoding=os.getenv("CLERK_ENCODING", "").strip() or "utf-8",
        ensure_ascii=_parse_bool(os.getenv("CLERK_ENSURE_ASCII"), False),
        create_dirs=_parse_bool(os.getenv("CLERK_CREATE_DIRS"), True),
        log_level=os.getenv("CLERK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_file=os.getenv("CLERK_LOG_FILE", "").strip() or None,
        log_json=_parse_bool(os.getenv("CLERK_LOG_JSON"), False),
    )
