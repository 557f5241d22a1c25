# /clerk/log_config.py
# Logging setup for applications using clerk.
# Library modules only call logging.getLogger(); an application calls setup()
# once to get console and/or rotating file output, as text or JSON lines.

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from dataclasses import dataclass
from typing import Optional

from . import config as config_module


__all__ = ["setup", "setup_from_config", "get_logger", "LogSetup", "JsonFormatter", "PLAIN_FORMAT"]

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Same limits the game's save log used
_MAX_BYTES = 5_000_000
_BACKUPS = 3


@dataclass
class LogSetup:
    level: int = logging.INFO
    to_console: bool = True
    log_file: Optional[str] = None
    as_json: bool = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, name, message (and exc_info)."""

    def format(self, record):
        obj = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            obj["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(obj, ensure_ascii=False)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "clerk")


def setup(opts: Optional[LogSetup] = None) -> logging.Logger:
    """
    Configure the root logger and return it.

    Handlers are attached on the first call only; later calls just change the
    level. Without ``opts`` the CLERK_LOG_* environment settings are used.
    """
    if opts is None:
        return setup_from_config(config_module.load())

    root = logging.getLogger()
    root.setLevel(opts.level)
    if getattr(root, "_clerk_configured", False):
        return root

    fmt = JsonFormatter() if opts.as_json else logging.Formatter(PLAIN_FORMAT)
    handlers: list[logging.Handler] = []
    if opts.to_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if opts.log_file:
        handlers.append(logging.handlers.RotatingFileHandler(
            opts.log_file, maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8"
        ))
    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)

    root._clerk_configured = True  # type: ignore[attr-defined]
    return root


def setup_from_config(cfg: config_module.Config) -> logging.Logger:
    """Configure logging from an already loaded Config."""
    level = getattr(logging, cfg.log_level.upper(), logging.INFO)
    return setup(LogSetup(
        level=level if isinstance(level, int) else logging.INFO,
        log_file=cfg.log_file,
        as_json=cfg.log_json,
    ))
