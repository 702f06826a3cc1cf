"""Top-level package for confkeeper.

Typed configuration files that are created from defaults, upgraded when the
schema grows, and repaired when corrupt. Applications should only depend on
the public API exposed here rather than importing internal modules directly.
"""

from .core import (
    ConfigError,
    ConfigManager,
    Configuration,
    ConfigWriteError,
    CorruptConfigError,
    HasDefault,
    InvalidLocationError,
    LoadResult,
    LoadStatus,
    MergeError,
    WriteStatus,
    load_config,
    reload_config,
    write_config,
)
from .logging_config import setup_logging
from .version import get_version

__all__: list[str] = [
    "ConfigManager",
    "Configuration",
    "HasDefault",
    "LoadResult",
    "LoadStatus",
    "WriteStatus",
    "load_config",
    "write_config",
    "reload_config",
    "ConfigError",
    "ConfigWriteError",
    "CorruptConfigError",
    "InvalidLocationError",
    "MergeError",
    "setup_logging",
    "get_version",
]
