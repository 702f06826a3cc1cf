"""Configuration base types and operation results.

Defines the :class:`Configuration` mixin carrying the non-persisted
``location`` attribute, the :class:`HasDefault` capability every managed type
must satisfy, and the typed results returned by the manager so callers can
tell a clean load from a recovery.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from .exceptions import ConfigError

__all__ = [
    "Configuration",
    "HasDefault",
    "LoadStatus",
    "LoadResult",
    "MergeResult",
    "WriteStatus",
    "attach_location",
]

T = TypeVar("T")


@runtime_checkable
class HasDefault(Protocol):
    """Capability required from every managed configuration type."""

    @classmethod
    def generate_default(cls):
        """Return a fresh, fully populated instance holding default values."""
        ...


class Configuration:
    """Mixin for configuration dataclasses.

    ``location`` is a plain class attribute rather than a dataclass field, so
    it never takes part in serialization, ``__eq__`` or ``__repr__``.
    """

    location: str = ""

    @property
    def config_dir(self) -> str:
        """Directory holding the configuration file, empty if unknown."""
        if not self.location:
            return ""
        return os.path.dirname(self.location)


def attach_location(config: object, location: str) -> None:
    """Set ``location`` on *config*, including on frozen dataclasses."""
    object.__setattr__(config, "location", location)


class LoadStatus(Enum):
    """Which path a load operation took."""

    CREATED = "created"  # no file on disk, defaults generated
    LOADED = "loaded"  # decoded and merged with defaults
    MERGE_FAILED = "merge_failed"  # decoded, merge degraded to the raw value
    RECOVERED = "recovered"  # file was corrupt, defaults regenerated
    INVALID_LOCATION = "invalid_location"


class WriteStatus(Enum):
    """Outcome of a change-detecting write."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"  # missing location, no I/O performed


@dataclass
class LoadResult(Generic[T]):
    """Result of loading a configuration.

    ``config`` is ``None`` only for :attr:`LoadStatus.INVALID_LOCATION`.
    ``error`` holds the recovered error for every path except a clean
    ``CREATED`` or ``LOADED``.
    """

    config: Optional[T]
    status: LoadStatus
    location: str = ""
    error: Optional[ConfigError] = None
    written: bool = False

    @property
    def ok(self) -> bool:
        return self.config is not None

    @property
    def recovered(self) -> bool:
        return self.status in (LoadStatus.RECOVERED, LoadStatus.MERGE_FAILED)


@dataclass
class MergeResult(Generic[T]):
    """Result of merging a configuration with its defaults."""

    config: T
    merged: bool
    error: Optional[ConfigError] = None
