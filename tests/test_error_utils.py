# /tests/test_error_utils.py

from __future__ import annotations

import logging

import pytest

from clerk.error_utils import ErrorKind, Outcome, attempt, catch_and_log_silent, classify
from clerk.errors import JsonDecodeError, JsonEncodeError, JsonFileNotFoundError


@pytest.mark.parametrize("exc, kind", [
    (JsonFileNotFoundError("x.json"), ErrorKind.NOT_FOUND),
    (FileNotFoundError("x.json"), ErrorKind.NOT_FOUND),
    (JsonDecodeError("bad"), ErrorKind.DECODE),
    (JsonEncodeError("bad"), ErrorKind.ENCODE),
    (PermissionError("denied"), ErrorKind.IO),
    (IsADirectoryError("dir"), ErrorKind.IO),
    (RuntimeError("boom"), ErrorKind.OTHER),
])
def test_classify(exc: Exception, kind: ErrorKind) -> None:
    assert classify(exc) is kind


def test_attempt_success() -> None:
    outcome = attempt(lambda a, b=0: a + b, 2, b=3)
    assert outcome == Outcome(ok=True, value=5)
    assert bool(outcome) is True


def test_attempt_failure_keeps_error_and_default(caplog: pytest.LogCaptureFixture) -> None:
    def boom() -> int:
        raise JsonDecodeError("not json", "save.json")

    with caplog.at_level(logging.ERROR, logger="clerk.errors"):
        outcome = attempt(boom, context="Loading save", default_return=-1)

    assert not outcome
    assert outcome.value == -1
    assert outcome.kind is ErrorKind.DECODE
    assert isinstance(outcome.error, JsonDecodeError)
    record = next(r for r in caplog.records if r.name == "clerk.errors")
    assert "Loading save" in record.getMessage()
    assert record.exc_info is not None


def test_not_found_is_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    def missing() -> None:
        raise JsonFileNotFoundError("slot1.json")

    with caplog.at_level(logging.DEBUG, logger="clerk.errors"):
        attempt(missing, context="Loading slot1")

    levels = [r.levelno for r in caplog.records if r.name == "clerk.errors"]
    assert levels == [logging.WARNING]


def test_catch_and_log_silent_decorator() -> None:
    calls = []

    @catch_and_log_silent("Parsing options", default_return={})
    def parse(value: str) -> dict:
        calls.append(value)
        if not value:
            raise ValueError("empty")
        return {"value": value}

    assert parse("fast") == {"value": "fast"}
    assert parse("") == {}
    assert calls == ["fast", ""]
    assert parse.__name__ == "parse"
