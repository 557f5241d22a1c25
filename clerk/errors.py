# /clerk/errors.py

from __future__ import annotations


class ClerkError(Exception):
    """Base class for errors raised by clerk."""


class JsonFileNotFoundError(ClerkError, FileNotFoundError):
    """The JSON file or resource does not exist."""

    def __init__(self, location: str):
        super().__init__(f"JSON file not found at {location}")
        self.location = location


class JsonDecodeError(ClerkError, ValueError):
    """Text is not valid JSON, or does not fit the requested shape."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class JsonEncodeError(ClerkError, TypeError):
    """A value could not be converted to JSON."""


class ReadOnlyResourceError(ClerkError, PermissionError):
    """The resource store does not accept writes."""
