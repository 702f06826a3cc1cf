"""Load, merge, write and reload typed configuration files.

:class:`ConfigManager` binds one configuration dataclass to a serializer and a
file store::

    manager = ConfigManager(AppSettings)
    settings = manager.load_config("~/.myapp/settings.json")

Load never raises for bad content: a missing file yields defaults, a corrupt
file is replaced by defaults, and an outdated file is upgraded by merging it
over the current defaults. Only filesystem write errors propagate, as
:class:`ConfigWriteError`.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Generic, Optional, Tuple, Type, TypeVar, Union

from .codec import from_document, to_document
from .document import DocumentValue, merge_documents
from .exceptions import (
    ConfigTypeError,
    ConfigWriteError,
    CorruptConfigError,
    DecodeError,
    InvalidLocationError,
    MergeError,
)
from .file_store import FileStore, LocalFileStore
from .models import HasDefault, LoadResult, LoadStatus, MergeResult, WriteStatus, attach_location
from .serializers import Serializer, serializer_for_path

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager", "load_config", "write_config", "reload_config"]

T = TypeVar("T")

PathLike = Union[str, "os.PathLike[str]"]


def _file_location(location: Optional[PathLike]) -> str:
    """Return *location* as a string, or "" when it cannot name a file.

    ``Path("")`` is ``Path(".")``, so the empty check runs on the string form
    and also rejects the current or parent directory.
    """
    if location is None:
        return ""
    text = os.fspath(location)
    if os.path.basename(os.path.normpath(text)) in ("", os.curdir, os.pardir):
        return ""
    return text


class ConfigManager(Generic[T]):
    """Persistence policy for a single configuration type.

    Args:
        config_type: Dataclass providing a ``generate_default()`` classmethod.
        serializer: Encoding used for every file. When omitted it is chosen
            per file from the suffix (YAML for ``.yml``/``.yaml``, else JSON).
        file_store: Filesystem access, :class:`LocalFileStore` by default.

    Raises:
        ConfigTypeError: if *config_type* cannot be managed.
    """

    def __init__(self, config_type: Type[T], serializer: Optional[Serializer] = None,
                 file_store: Optional[FileStore] = None) -> None:
        if not isinstance(config_type, type) or not dataclasses.is_dataclass(config_type):
            raise ConfigTypeError(f"{config_type!r} is not a dataclass type")
        if not isinstance(config_type, HasDefault) or not callable(config_type.generate_default):
            raise ConfigTypeError(
                "Configuration types must implement generate_default()",
                config_type=config_type.__name__,
            )
        self._config_type = config_type
        self._serializer = serializer
        self._store: FileStore = file_store or LocalFileStore()

    @property
    def config_type(self) -> Type[T]:
        return self._config_type

    @property
    def type_name(self) -> str:
        return self._config_type.__name__

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load(self, location: Optional[PathLike]) -> LoadResult[T]:
        """Load the configuration at *location*, upgrading the file if needed.

        The returned config is always written back to disk before returning,
        so newly generated defaults and merged fields land on disk at once.
        """
        location = _file_location(location)
        if not location:
            error = InvalidLocationError(
                "A configuration tried to load without specifying a location on disk",
                config_type=self.type_name,
            )
            logger.error("%s", error)
            return LoadResult(config=None, status=LoadStatus.INVALID_LOCATION, error=error)

        path = os.path.abspath(os.path.expanduser(location))
        error = None

        if not self._store.exists(path):
            config = self._new_default(path)
            status = LoadStatus.CREATED
            logger.info("No %s found at %s, generated defaults", self.type_name, path)
        else:
            try:
                document = self._read_document(path)
                config, merge_error = self._build_merged(document)
            except (DecodeError, OSError, ValueError, RecursionError) as exc:
                error = CorruptConfigError(
                    f"Invalid configuration file {path}",
                    location=path, config_type=self.type_name, cause=exc,
                )
                logger.error("%s", error, exc_info=exc)
                config = self._new_default(path)
                status = LoadStatus.RECOVERED
            else:
                attach_location(config, path)
                if merge_error is None:
                    status = LoadStatus.LOADED
                else:
                    status = LoadStatus.MERGE_FAILED
                    error = merge_error

        written = self.write(config) is WriteStatus.WRITTEN
        return LoadResult(config=config, status=status, location=path, error=error, written=written)

    def load_config(self, location: Optional[PathLike]) -> Optional[T]:
        """Return the loaded configuration, or ``None`` for an empty location."""
        return self.load(location).config

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------
    def merge(self, current: T) -> MergeResult[T]:
        """Merge *current* over a fresh default configuration.

        Values present in *current* win; ``None`` values and fields missing
        from an older file are filled from the defaults; lists are replaced,
        never combined. On any failure *current* is returned unchanged.
        """
        location = getattr(current, "location", "")
        try:
            defaults = self._config_type.generate_default()
            combined = merge_documents(to_document(defaults), to_document(current))
            merged = from_document(self._config_type, combined)
        except Exception as exc:
            error = MergeError(
                "An error occurred when updating a configuration",
                location=location or None, config_type=self.type_name, cause=exc,
            )
            logger.error("%s", error)
            return MergeResult(config=current, merged=False, error=error)

        attach_location(merged, location)
        return MergeResult(config=merged, merged=True)

    def update(self, current: T) -> T:
        """Return *current* merged with defaults (see :meth:`merge`)."""
        return self.merge(current).config

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def write(self, config: Optional[T]) -> WriteStatus:
        """Persist *config* to its location if the serialized text changed.

        Raises:
            ConfigWriteError: if the directory or the file cannot be written.
        """
        location = _file_location(getattr(config, "location", None))
        directory = self._store.parent_dir(location) if location else ""
        if not location or not directory:
            error = InvalidLocationError(
                "A configuration attempted to save when it or its location was empty",
                location=location or None, config_type=self.type_name,
            )
            logger.error("%s", error)
            return WriteStatus.SKIPPED

        text = self._serializer_for(location).encode(config)

        try:
            self._store.ensure_directory(directory)
            if self._matches_disk(location, text):
                logger.debug("Configuration %s unchanged, skipping write", location)
                return WriteStatus.UNCHANGED
            self._store.write_text(location, text)
        except OSError as exc:
            raise ConfigWriteError(
                f"Could not write configuration to {location}",
                location=location, config_type=self.type_name, cause=exc,
            ) from exc

        logger.debug("Wrote configuration %s", location)
        return WriteStatus.WRITTEN

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------
    def reload(self, config: T) -> T:
        """Re-apply current defaults to the in-memory *config*.

        The file is not read; use :meth:`reload_from_disk` to pick up edits
        made to the file since it was loaded.
        """
        return self.update(config)

    def reload_from_disk(self, config: T) -> LoadResult[T]:
        """Decode the file at ``config.location`` again and merge it."""
        return self.load(getattr(config, "location", ""))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _serializer_for(self, location: str) -> Serializer:
        if self._serializer is not None:
            return self._serializer
        return serializer_for_path(location)

    def _new_default(self, location: str) -> T:
        config = self._config_type.generate_default()
        attach_location(config, location)
        return config

    def _read_document(self, location: str) -> DocumentValue:
        text = self._store.read_text(location)
        return self._serializer_for(location).parse(text)

    def _build_merged(self, document: DocumentValue) -> Tuple[T, Optional[MergeError]]:
        """Overlay the file document on the defaults, then build T once.

        Field validation only ever sees the merged, complete document. If the
        defaults cannot be produced, the file document is decoded on its own.
        Raises DecodeError when the resulting document does not fit T.
        """
        if not isinstance(document, dict):
            raise DecodeError(
                f"Expected an object at the document root, got {type(document).__name__}",
                path=self.type_name,
            )
        try:
            base = to_document(self._config_type.generate_default())
        except Exception as exc:
            error = MergeError(
                "An error occurred when updating a configuration",
                config_type=self.type_name, cause=exc,
            )
            logger.error("%s", error)
            return from_document(self._config_type, document), error
        return from_document(self._config_type, merge_documents(base, document)), None

    def _matches_disk(self, location: str, text: str) -> bool:
        if not self._store.exists(location):
            return False
        try:
            return self._store.read_text(location) == text
        except ValueError:
            # Undecodable bytes: overwrite
            return False


# ----------------------------------------------------------------------
# Convenience functions
# ----------------------------------------------------------------------

def load_config(config_type: Type[T], location: Optional[PathLike]) -> Optional[T]:
    """Load *config_type* from *location* with the default serializer and store."""
    return ConfigManager(config_type).load_config(location)


def write_config(config: T) -> WriteStatus:
    """Write *config* to its own ``location`` if its content changed."""
    return ConfigManager(type(config)).write(config)


def reload_config(config: T) -> T:
    """Re-apply the defaults of ``type(config)`` to *config*."""
    return ConfigManager(type(config)).reload(config)
