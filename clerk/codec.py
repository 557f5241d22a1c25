# /clerk/codec.py

"""
JSON Codec

Converts between caller-shaped values and JSON text:
- Dataclasses (nested, in lists/dicts/Optionals) convert field by field
- Classes exposing to_dict()/from_dict() use those hooks
- Plain JSON shapes (dict, list, str, int, float, bool) are type-checked
- Other classes are built as cls(**object)
- A missing or Any shape returns the parsed JSON unchanged

Decoding tolerates unknown keys from older/newer files and lets missing keys
fall back to field defaults.
"""

from __future__ import annotations

import dataclasses
import json
import types
from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .errors import JsonDecodeError, JsonEncodeError

T = TypeVar("T")

_PLAIN_DEFAULTS: Dict[type, Any] = {
    dict: dict,
    list: list,
    str: str,
    int: int,
    float: float,
    bool: bool,
}

_UNION_TYPES = (Union, types.UnionType)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def _key_to_json(key: Any) -> str:
    # Same spelling json.dumps uses for non-string keys
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    raise TypeError(f"keys must be str, int, float, bool or Enum, not {type(key).__name__}")


def _key_from_json(key: str, tp: Any, where: str, source: str) -> Any:
    if tp is None or tp is Any or tp is object or tp is str:
        return key
    if isinstance(tp, type) and issubclass(tp, Enum):
        for member in tp:
            try:
                if _key_to_json(member.value) == key:
                    return member
            except TypeError:
                continue
        raise JsonDecodeError(f"{where}: key '{key}' is not a valid {tp.__name__}", source)
    if tp is bool:
        if key in ("true", "false"):
            return key == "true"
    elif tp in (int, float):
        try:
            return tp(key)
        except ValueError:
            pass
    else:
        raise JsonDecodeError(f"{where}: unsupported key type {_type_name(tp)}", source)
    raise JsonDecodeError(f"{where}: key '{key}' is not a valid {tp.__name__}", source)


# -------------------------
# Encoding
# -------------------------

def to_jsonable(value: Any) -> Any:
    """Return plain dict/list/scalar data for ``value``."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return to_jsonable(to_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_key_to_json(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def encode(value: Any, indent: Optional[int] = 2, ensure_ascii: bool = False) -> str:
    """Serialize ``value`` to pretty-printed JSON text."""
    try:
        return json.dumps(to_jsonable(value), indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise JsonEncodeError(f"Cannot encode {type(value).__name__} as JSON: {exc}") from exc


# -------------------------
# Decoding
# -------------------------

def _field_types(cls: type) -> Dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        pass
    # Resolve field by field so one bad forward ref only loosens that field
    hints: Dict[str, Any] = {}
    localns = dict(vars(cls))
    for f in dataclasses.fields(cls):
        if not isinstance(f.type, str):
            hints[f.name] = f.type
            continue
        holder = type(cls.__name__, (), {"__annotations__": {f.name: f.type}, "__module__": cls.__module__})
        try:
            hints[f.name] = get_type_hints(holder, localns=localns)[f.name]
        except (NameError, TypeError, SyntaxError):
            hints[f.name] = Any
    return hints


def _convert(data: Any, tp: Any, where: str, source: str) -> Any:
    if tp is None or tp is Any or tp is object:
        return data

    origin = get_origin(tp)

    if origin in _UNION_TYPES:
        args = get_args(tp)
        if data is None and type(None) in args:
            return None
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _convert(data, arg, where, source)
            except JsonDecodeError:
                continue
        raise JsonDecodeError(f"{where}: {_json_type(data)} does not match {tp}", source)

    if origin in (list, tuple):
        if not isinstance(data, list):
            raise JsonDecodeError(f"{where}: expected array, got {_json_type(data)}", source)
        args = get_args(tp)
        if origin is tuple and args and args[-1] is not Ellipsis:
            if len(args) != len(data):
                raise JsonDecodeError(f"{where}: expected {len(args)} items, got {len(data)}", source)
            return tuple(_convert(v, a, f"{where}[{i}]", source) for i, (a, v) in enumerate(zip(args, data)))
        item_tp = args[0] if args else Any
        items = [_convert(v, item_tp, f"{where}[{i}]", source) for i, v in enumerate(data)]
        return tuple(items) if origin is tuple else items

    if origin is dict:
        if not isinstance(data, dict):
            raise JsonDecodeError(f"{where}: expected object, got {_json_type(data)}", source)
        args = get_args(tp)
        key_tp, value_tp = args if len(args) == 2 else (Any, Any)
        return {
            _key_from_json(k, key_tp, where, source): _convert(v, value_tp, f"{where}.{k}", source)
            for k, v in data.items()
        }

    from_dict = getattr(tp, "from_dict", None)
    if isinstance(tp, type) and callable(from_dict):
        if not isinstance(data, dict):
            raise JsonDecodeError(f"{where}: expected object for {tp.__name__}, got {_json_type(data)}", source)
        try:
            return from_dict(data)
        except (TypeError, KeyError, ValueError) as exc:
            raise JsonDecodeError(f"{where}: {exc}", source) from exc

    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        if not isinstance(data, dict):
            raise JsonDecodeError(f"{where}: expected object for {tp.__name__}, got {_json_type(data)}", source)
        hints = _field_types(tp)
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(tp):
            if not f.init or f.name not in data:
                continue
            kwargs[f.name] = _convert(data[f.name], hints.get(f.name, Any), f"{where}.{f.name}", source)
        try:
            return tp(**kwargs)
        except TypeError as exc:
            raise JsonDecodeError(f"{where}: {exc}", source) from exc

    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(data)
        except ValueError as exc:
            raise JsonDecodeError(f"{where}: {exc}", source) from exc

    if tp is bool:
        if not isinstance(data, bool):
            raise JsonDecodeError(f"{where}: expected boolean, got {_json_type(data)}", source)
        return data
    if tp is int:
        if isinstance(data, bool) or not isinstance(data, int):
            raise JsonDecodeError(f"{where}: expected integer, got {_json_type(data)}", source)
        return data
    if tp is float:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise JsonDecodeError(f"{where}: expected number, got {_json_type(data)}", source)
        return float(data)
    if tp in (str, dict, list):
        if not isinstance(data, tp):
            raise JsonDecodeError(f"{where}: expected {_type_name(tp)}, got {_json_type(data)}", source)
        return data

    if tp is tuple:
        if not isinstance(data, list):
            raise JsonDecodeError(f"{where}: expected array, got {_json_type(data)}", source)
        return tuple(data)

    # Any other class: build it from the object's keys
    if isinstance(tp, type):
        if not isinstance(data, dict):
            raise JsonDecodeError(f"{where}: expected object for {tp.__name__}, got {_json_type(data)}", source)
        try:
            return tp(**data)
        except (TypeError, ValueError) as exc:
            raise JsonDecodeError(f"{where}: cannot build {tp.__name__}: {exc}", source) from exc

    raise JsonDecodeError(f"{where}: unsupported target type {tp}", source)


def from_jsonable(data: Any, cls: Optional[Type[T]] = None, source: str = "") -> T:
    """Shape already-parsed JSON ``data`` into ``cls``."""
    return _convert(data, cls, "$", source)


def decode(text: str, cls: Optional[Type[T]] = None, source: str = "") -> T:
    """Parse JSON ``text`` and shape it into ``cls``.

    ``source`` names the file or resource in error messages.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(str(exc), source) from exc
    return from_jsonable(data, cls, source)


def default_of(cls: Optional[Type[T]]) -> Optional[T]:
    """Zero value for ``cls``: ``cls()`` when it can be built without arguments, else None."""
    if cls is None or cls is Any:
        return None
    origin = get_origin(cls) or cls
    if origin in _PLAIN_DEFAULTS:
        return _PLAIN_DEFAULTS[origin]()
    if isinstance(cls, type):
        try:
            return cls()
        except Exception:
            return None
    return None
