# -*- coding: utf-8 -*-
"""Package version lookup.

Provides a single public function, ``get_version()``, which reads the version
of the installed distribution and falls back to ``"dev"`` for source
checkouts that were never installed.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

DISTRIBUTION = "confkeeper"

_CACHED_VERSION: Optional[str] = None


def get_version() -> str:
    """Return the package version string (e.g. ``1.0.0``)."""
    global _CACHED_VERSION
    if _CACHED_VERSION:
        return _CACHED_VERSION

    try:
        _CACHED_VERSION = version(DISTRIBUTION)
    except PackageNotFoundError:
        _CACHED_VERSION = "dev"
    return _CACHED_VERSION
