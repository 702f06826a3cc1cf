"""Text encodings for configuration files.

Two serializers share the same contract: ``encode`` turns a configuration into
indented, human-readable text, ``parse`` turns text into a document tree and
``decode`` turns text back into an instance of the requested type. Both
``parse`` and ``decode`` raise :class:`DecodeError` for anything unusable.
The transient ``location`` attribute is never part of the text.
"""

from __future__ import annotations

import json
import os
from typing import Any, Protocol, Type, TypeVar

import yaml

from .codec import from_document, to_document
from .document import DocumentValue
from .exceptions import DecodeError

__all__ = ["Serializer", "JsonSerializer", "YamlSerializer", "serializer_for_path"]

T = TypeVar("T")

YAML_SUFFIXES = (".yml", ".yaml")


class Serializer(Protocol):
    """Encode/decode contract used by the configuration manager."""

    def encode(self, config: Any) -> str:
        ...

    def parse(self, text: str) -> DocumentValue:
        ...

    def decode(self, text: str, config_type: Type[T]) -> T:
        ...


class JsonSerializer:
    """Indented JSON encoding, the default file format."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def encode(self, config: Any) -> str:
        return json.dumps(to_document(config), indent=self.indent, ensure_ascii=False) + "\n"

    def parse(self, text: str) -> DocumentValue:
        """Return the document tree held in *text*."""
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise DecodeError("Invalid JSON", cause=exc) from exc

    def decode(self, text: str, config_type: Type[T]) -> T:
        return from_document(config_type, self.parse(text))


class YamlSerializer:
    """Block-style YAML encoding for ``.yml`` / ``.yaml`` files."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def encode(self, config: Any) -> str:
        return yaml.safe_dump(
            to_document(config),
            indent=self.indent,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    def parse(self, text: str) -> DocumentValue:
        try:
            return yaml.safe_load(text)
        except (yaml.YAMLError, RecursionError) as exc:
            raise DecodeError("Invalid YAML", cause=exc) from exc

    def decode(self, text: str, config_type: Type[T]) -> T:
        return from_document(config_type, self.parse(text))


def serializer_for_path(location: str) -> Serializer:
    """Pick the serializer matching the file suffix (JSON unless YAML)."""
    suffix = os.path.splitext(location)[1].lower()
    if suffix in YAML_SUFFIXES:
        return YamlSerializer()
    return JsonSerializer()
