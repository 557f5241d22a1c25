# /clerk/json_file.py

"""
JSON File Handler

Static helpers for writing values to and reading values from JSON:
- write/read a JSON file at a caller supplied path
- read/write JSON kept as a packaged resource, looked up by key
- try_* variants that log failures and return a success flag instead of raising

Every call is self-contained: one encode or decode, at most one file or
resource access, nothing kept between calls. Concurrent writers to the same
path are not coordinated; the last write wins.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Type, TypeVar, Union

from . import codec
from . import config as config_module
from .config import Config
from .error_utils import attempt
from .errors import JsonDecodeError, JsonFileNotFoundError
from .resources import DirectoryResourceStore, ResourceStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, os.PathLike]


def _resolve_config(config: Optional[Config]) -> Config:
    return config if config is not None else config_module.load()


def _resolve_store(store: Optional[ResourceStore], config: Optional[Config] = None) -> ResourceStore:
    if store is not None:
        return store
    cfg = _resolve_config(config)
    return DirectoryResourceStore(cfg.resources_dir, encoding=cfg.encoding, create_dirs=cfg.create_dirs)


# ---------- files ----------

def write_json_file(path: PathLike, data: Any, *, config: Optional[Config] = None) -> None:
    """
    Serialize ``data`` to JSON and write it to ``path``, replacing any existing file.

    The value is encoded before the file is opened, so an unencodable value
    leaves an existing file untouched. Missing parent directories are created
    unless ``Config.create_dirs`` is off. Filesystem errors propagate.
    """
    cfg = _resolve_config(config)
    text = codec.encode(data, indent=cfg.json_indent, ensure_ascii=cfg.ensure_ascii)
    p = Path(path)
    if cfg.create_dirs:
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding=cfg.encoding) as f:
        f.write(text)
    logger.debug("Wrote JSON file %s (%d chars)", p, len(text))


def try_write_json_file(path: PathLike, data: Any, *, config: Optional[Config] = None) -> bool:
    """Like write_json_file, but failures are logged and reported as False."""
    outcome = attempt(write_json_file, path, data, config=config, context=f"Writing JSON file {path}")
    return outcome.ok


def read_json_file(path: PathLike, cls: Optional[Type[T]] = None, *, config: Optional[Config] = None) -> T:
    """
    Read the JSON file at ``path`` and decode it into ``cls``.

    Raises:
        JsonFileNotFoundError: ``path`` does not exist.
        JsonDecodeError: the content is not valid JSON or does not fit ``cls``.
    """
    cfg = _resolve_config(config)
    p = Path(path)
    if not p.exists():
        raise JsonFileNotFoundError(str(path))
    try:
        with p.open("r", encoding=cfg.encoding) as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise JsonDecodeError(f"not {cfg.encoding} text: {exc}", str(path)) from exc
    logger.debug("Read JSON file %s (%d chars)", p, len(text))
    return codec.decode(text, cls, source=str(path))


def try_read_json_file(path: PathLike, cls: Optional[Type[T]] = None, *,
                       config: Optional[Config] = None) -> Tuple[bool, Optional[T]]:
    """
    Attempt to read and decode ``path``.

    Returns ``(True, value)`` on success. Any failure (missing file, bad JSON,
    I/O error) is logged and gives ``(False, default)`` where default is the
    zero value of ``cls``.
    """
    outcome = attempt(read_json_file, path, cls, config=config, context=f"Reading JSON file {path}")
    if outcome.ok:
        return True, outcome.value
    return False, codec.default_of(cls)


# ---------- packaged resources ----------

def read_json_resource(key: str, cls: Optional[Type[T]] = None, *,
                       store: Optional[ResourceStore] = None) -> T:
    """
    Read JSON bundled as a resource and decode it into ``cls``.

    ``key`` is the path inside the store without file extension, e.g.
    ``"levels/intro"``. Without a ``store`` the Resources folder from the
    loaded Config is used.

    Raises:
        JsonFileNotFoundError: the store has no entry for ``key``.
        JsonDecodeError: the content is not valid JSON or does not fit ``cls``.
    """
    rs = _resolve_store(store)
    try:
        text = rs.load_text(key)
    except UnicodeDecodeError as exc:
        raise JsonDecodeError(f"not valid text: {exc}", rs.describe(key)) from exc
    if text is None:
        raise JsonFileNotFoundError(rs.describe(key))
    logger.debug("Read JSON resource %s", rs.describe(key))
    return codec.decode(text, cls, source=rs.describe(key))


def try_read_json_resource(key: str, cls: Optional[Type[T]] = None, *,
                           store: Optional[ResourceStore] = None) -> Tuple[bool, Optional[T]]:
    outcome = attempt(read_json_resource, key, cls, store=store, context=f"Reading JSON resource {key}")
    if outcome.ok:
        return True, outcome.value
    return False, codec.default_of(cls)


def write_json_resource(key: str, data: Any, *, store: Optional[ResourceStore] = None,
                        config: Optional[Config] = None) -> None:
    """
    Serialize ``data`` and store it as the resource ``key``.

    Only writable stores (a Resources folder) accept this; read-only stores
    raise ReadOnlyResourceError.
    """
    cfg = _resolve_config(config)
    rs = _resolve_store(store, cfg)
    text = codec.encode(data, indent=cfg.json_indent, ensure_ascii=cfg.ensure_ascii)
    rs.save_text(key, text)
    logger.debug("Wrote JSON resource %s (%d chars)", rs.describe(key), len(text))
