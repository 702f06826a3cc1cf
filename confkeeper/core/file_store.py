"""Filesystem access used by the configuration manager.

:class:`LocalFileStore` writes through a temporary sibling file that is
renamed over the target, so readers never observe a half-written
configuration.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Protocol

logger = logging.getLogger(__name__)

__all__ = ["FileStore", "LocalFileStore"]


class FileStore(Protocol):
    """Minimal file access contract."""

    def exists(self, path: str) -> bool:
        ...

    def read_text(self, path: str) -> str:
        ...

    def write_text(self, path: str, text: str) -> None:
        ...

    def ensure_directory(self, path: str) -> None:
        ...

    def parent_dir(self, path: str) -> str:
        ...


class LocalFileStore:
    """UTF-8 text files on the local filesystem."""

    encoding = "utf-8"

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding=self.encoding, newline="") as fh:
            return fh.read()

    def write_text(self, path: str, text: str) -> None:
        directory = self.parent_dir(path) or "."
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.debug("Could not remove temporary file %s", tmp_path)
            raise

    def ensure_directory(self, path: str) -> None:
        if not os.path.isdir(path):
            os.makedirs(path, exist_ok=True)
            logger.info("Created configuration directory: %s", path)

    def parent_dir(self, path: str) -> str:
        return os.path.dirname(path)
