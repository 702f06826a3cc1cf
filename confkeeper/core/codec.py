"""Conversion between configuration dataclasses and documents.

``to_document`` walks a dataclass instance and produces a JSON-compatible
tree; ``from_document`` rebuilds an instance from such a tree, checking every
value against the field's type hint. Fields are matched by name only.

A field missing from the document, or stored as ``null``, is decoded as
``None``; the manager's merge step backfills it from the type's defaults.
Keys unknown to the dataclass are ignored.
"""

from __future__ import annotations

import dataclasses
import types
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .document import Document, DocumentValue
from .exceptions import DecodeError

__all__ = ["to_document", "from_document", "is_persisted"]

T = TypeVar("T")

_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, types.UnionType)
_SEQUENCE_ORIGINS = (list, tuple)


def is_persisted(field: dataclasses.Field) -> bool:
    """Return whether a dataclass field is written to disk."""
    return field.metadata.get("persist", True)


def to_document(value: Any) -> DocumentValue:
    """Convert a configuration value into a document tree."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_document(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if is_persisted(f)
        }
    if isinstance(value, Enum):
        return to_document(value.value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Mapping):
        return {str(key): to_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_document(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"Cannot convert {type(value).__name__} to a document value")


def from_document(config_type: Type[T], document: Document) -> T:
    """Build a *config_type* instance from a decoded document.

    Raises:
        DecodeError: if the document is not a mapping, a value does not match
            its field type, or the dataclass constructor rejects the values.
    """
    if not isinstance(document, dict):
        raise DecodeError(
            f"Expected an object at the document root, got {type(document).__name__}",
            path=config_type.__name__,
        )
    return _decode_dataclass(config_type, document, config_type.__name__)


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------

def _decode_dataclass(cls: type, data: Dict[str, Any], path: str) -> Any:
    try:
        hints = get_type_hints(cls)
    except Exception as exc:
        raise DecodeError(f"Cannot resolve type hints of {cls.__name__}", path=path, cause=exc) from exc

    kwargs: Dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        if not field.init or not is_persisted(field):
            continue
        raw = data.get(field.name)
        field_path = f"{path}.{field.name}"
        kwargs[field.name] = None if raw is None else _decode_value(hints[field.name], raw, field_path)

    try:
        return cls(**kwargs)
    except Exception as exc:
        raise DecodeError(f"Cannot construct {cls.__name__}", path=path, cause=exc) from exc


def _decode_value(tp: Any, value: Any, path: str) -> Any:
    if tp is Any:
        return value

    origin = get_origin(tp)

    if origin in _UNION_ORIGINS:
        members = get_args(tp)
        if value is None:
            if _NONE_TYPE in members:
                return None
            raise DecodeError("Unexpected null", path=path)
        last_error = None
        for member in members:
            if member is _NONE_TYPE:
                continue
            try:
                return _decode_value(member, value, path)
            except DecodeError as exc:
                last_error = exc
        raise DecodeError(f"Value {value!r} matches none of {tp}", path=path, cause=last_error)

    if value is None:
        raise DecodeError("Unexpected null", path=path)

    if dataclasses.is_dataclass(tp):
        if not isinstance(value, dict):
            raise DecodeError(f"Expected an object for {tp.__name__}", path=path)
        return _decode_dataclass(tp, value, path)

    if origin in _SEQUENCE_ORIGINS or tp in _SEQUENCE_ORIGINS:
        return _decode_sequence(origin or tp, get_args(tp), value, path)

    if origin is dict or tp is dict:
        if not isinstance(value, dict):
            raise DecodeError("Expected an object", path=path)
        args = get_args(tp)
        item_type = args[1] if len(args) == 2 else Any
        return {key: _decode_value(item_type, item, f"{path}.{key}") for key, item in value.items()}

    if isinstance(tp, type):
        return _decode_scalar(tp, value, path)

    raise DecodeError(f"Unsupported field type {tp}", path=path)


def _decode_sequence(container: type, args: tuple, value: Any, path: str) -> Any:
    if not isinstance(value, list):
        raise DecodeError("Expected an array", path=path)

    if container is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        if len(args) != len(value):
            raise DecodeError(f"Expected {len(args)} items, got {len(value)}", path=path)
        return tuple(_decode_value(item_type, item, f"{path}[{i}]")
                     for i, (item_type, item) in enumerate(zip(args, value)))

    item_type = args[0] if args else Any
    items = [_decode_value(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]
    return tuple(items) if container is tuple else items


def _decode_scalar(tp: type, value: Any, path: str) -> Any:
    if issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError as exc:
            raise DecodeError(f"{value!r} is not a valid {tp.__name__}", path=path, cause=exc) from exc
    if issubclass(tp, PurePath):
        if not isinstance(value, str):
            raise DecodeError("Expected a path string", path=path)
        return tp(value)
    if tp is bool:
        if not isinstance(value, bool):
            raise DecodeError(f"Expected a boolean, got {value!r}", path=path)
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"Expected an integer, got {value!r}", path=path)
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(f"Expected a number, got {value!r}", path=path)
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise DecodeError(f"Expected a string, got {value!r}", path=path)
        return value
    if isinstance(value, tp):
        return value
    raise DecodeError(f"Expected {tp.__name__}, got {type(value).__name__}", path=path)
