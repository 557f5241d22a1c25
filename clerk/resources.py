# /clerk/resources.py

"""
Packaged Resource Lookup

Resolves logical keys (relative path, no file extension) to JSON text that
ships with the game:
- DirectoryResourceStore: a Resources folder on disk, readable and writable
- QtResourceStore: files compiled into the Qt resource system, read-only
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QFile, QIODevice, QResource

from .errors import ReadOnlyResourceError

log = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".json"


def _with_suffix(key: str, suffix: str) -> str:
    key = key.replace("\\", "/").lstrip("/")
    return key if key.endswith(suffix) else f"{key}{suffix}"


class ResourceStore(ABC):
    """Contract for key -> text lookups of bundled assets."""

    @abstractmethod
    def load_text(self, key: str) -> Optional[str]:
        """Return the text stored under ``key``, or None when there is no entry."""

    def save_text(self, key: str, text: str) -> None:
        raise ReadOnlyResourceError(f"{type(self).__name__} is read-only, cannot write '{key}'")

    def describe(self, key: str) -> str:
        """Human readable location of ``key`` for messages and logs."""
        return key


class DirectoryResourceStore(ResourceStore):
    """Resources folder on disk: ``<root>/<key>.json``."""

    def __init__(self, root: Union[str, Path], suffix: str = DEFAULT_SUFFIX,
                 encoding: str = "utf-8", create_dirs: bool = True):
        self.root = Path(root)
        self.suffix = suffix
        self.encoding = encoding
        self.create_dirs = create_dirs

    def path_for(self, key: str) -> Path:
        path = self.root / _with_suffix(key, self.suffix)
        root = self.root.resolve()
        resolved = path.resolve()
        if root not in resolved.parents:
            raise ValueError(f"Resource key '{key}' resolves outside {self.root}")
        return path

    def load_text(self, key: str) -> Optional[str]:
        p = self.path_for(key)
        if not p.is_file():
            return None
        return p.read_text(encoding=self.encoding)

    def save_text(self, key: str, text: str) -> None:
        p = self.path_for(key)
        if self.create_dirs:
            p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding=self.encoding)

    def describe(self, key: str) -> str:
        return str(self.root / _with_suffix(key, self.suffix))


class QtResourceStore(ResourceStore):
    """
    Read-only lookup through the Qt resource system.

    ``prefix`` is normally ``":/"`` or a qrc prefix such as ``":/data"``;
    QFile also accepts a plain directory, which reads loose files the same way.
    """

    def __init__(self, prefix: str = ":/", suffix: str = DEFAULT_SUFFIX, encoding: str = "utf-8"):
        self.prefix = prefix if prefix.endswith("/") else prefix + "/"
        self.suffix = suffix
        self.encoding = encoding

    @staticmethod
    def register(rcc_file: Union[str, Path], map_root: str = "") -> None:
        """Register a compiled ``.rcc`` file so its entries become readable."""
        if not QResource.registerResource(str(rcc_file), map_root):
            raise OSError(f"Failed to register Qt resource file {rcc_file}")
        log.debug("Registered Qt resource file %s", rcc_file)

    def path_for(self, key: str) -> str:
        return self.prefix + _with_suffix(key, self.suffix)

    def load_text(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        qfile = QFile(path)
        if not qfile.exists():
            return None
        if not qfile.open(QIODevice.OpenModeFlag.ReadOnly):
            raise OSError(f"Cannot open resource {path}: {qfile.errorString()}")
        try:
            data = qfile.readAll()
        finally:
            qfile.close()
        return bytes(data.data()).decode(self.encoding)

    def describe(self, key: str) -> str:
        return self.path_for(key)
