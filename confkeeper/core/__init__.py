"""Core load/merge/write machinery, independent of any configuration schema."""

from .document import merge_documents
from .exceptions import (
    ConfigError,
    ConfigTypeError,
    ConfigWriteError,
    CorruptConfigError,
    DecodeError,
    InvalidLocationError,
    MergeError,
)
from .file_store import FileStore, LocalFileStore
from .manager import ConfigManager, load_config, reload_config, write_config
from .models import (
    Configuration,
    HasDefault,
    LoadResult,
    LoadStatus,
    MergeResult,
    WriteStatus,
)
from .serializers import JsonSerializer, Serializer, YamlSerializer, serializer_for_path

__all__ = [
    "ConfigManager",
    "Configuration",
    "HasDefault",
    "LoadResult",
    "LoadStatus",
    "MergeResult",
    "WriteStatus",
    "load_config",
    "write_config",
    "reload_config",
    "merge_documents",
    "Serializer",
    "JsonSerializer",
    "YamlSerializer",
    "serializer_for_path",
    "FileStore",
    "LocalFileStore",
    "ConfigError",
    "ConfigTypeError",
    "ConfigWriteError",
    "CorruptConfigError",
    "DecodeError",
    "InvalidLocationError",
    "MergeError",
]
