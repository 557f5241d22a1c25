# /clerk/error_utils.py
"""
Error handling helpers for clerk

Turns exceptions from file and resource operations into logged results so
callers that treat a missing or broken file as "use defaults" need no
try/except of their own.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import JsonDecodeError, JsonEncodeError

T = TypeVar("T")

ERRORS_LOGGER = "clerk.errors"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DECODE = "decode"
    ENCODE = "encode"
    IO = "io"
    OTHER = "other"


def classify(exc: BaseException) -> ErrorKind:
    # FileNotFoundError before OSError: it is one
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, JsonDecodeError):
        return ErrorKind.DECODE
    if isinstance(exc, JsonEncodeError):
        return ErrorKind.ENCODE
    if isinstance(exc, OSError):
        return ErrorKind.IO
    return ErrorKind.OTHER


@dataclass
class Outcome(Generic[T]):
    """Result of an attempted operation; ``error`` is None on success."""
    ok: bool
    value: Optional[T] = None
    error: Optional[Exception] = None
    kind: Optional[ErrorKind] = None

    def __bool__(self) -> bool:
        return self.ok


def log_failure(exc: Exception, context: str, kind: Optional[ErrorKind] = None) -> None:
    """Log a caught failure on the clerk.errors logger."""
    logger = logging.getLogger(ERRORS_LOGGER)
    kind = kind or classify(exc)
    if kind is ErrorKind.NOT_FOUND:
        logger.warning(f"{context}: {exc}")
    else:
        logger.error(f"Error in {context}: {exc}", exc_info=exc)


def attempt(func: Callable[..., T], *args, context: str = "", default_return: Any = None, **kwargs) -> Outcome[T]:
    """
    Call ``func`` and capture any failure as an Outcome.

    Args:
        func: Function to call
        *args: Positional arguments for the function
        context: Description for the log entry
        default_return: Value placed in the Outcome if an error occurs
        **kwargs: Keyword arguments for the function
    """
    try:
        return Outcome(ok=True, value=func(*args, **kwargs))
    except Exception as e:
        func_context = context or f"{func.__module__}.{func.__name__}"
        kind = classify(e)
        log_failure(e, func_context, kind)
        return Outcome(ok=False, value=default_return, error=e, kind=kind)


def catch_and_log_silent(context: str = "", default_return: Any = None):
    """
    Decorator that catches exceptions and logs them instead of raising.

    Args:
        context: Description of what the function does
        default_return: Value to return if an exception occurs
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            outcome = attempt(func, *args, context=context, default_return=default_return, **kwargs)
            return outcome.value
        return wrapper
    return decorator
