"""Configuration persistence exception classes.

Every error raised or reported by confkeeper derives from :class:`ConfigError`.
Load and Write never raise :class:`InvalidLocationError`,
:class:`CorruptConfigError` or :class:`MergeError`; those are logged and
returned inside the operation result so callers can see which path was taken.
:class:`ConfigWriteError` is the one failure that propagates.
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base exception for all configuration persistence errors."""

    def __init__(self, message: str, location: Optional[str] = None,
                 config_type: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.location = location
        self.config_type = config_type
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.config_type:
            message = f"[{self.config_type}] {message}"
        if self.cause is not None:
            message = f"{message}: {self.cause}"
        return message


class InvalidLocationError(ConfigError):
    """A configuration was loaded or saved without a usable file location."""
    pass


class CorruptConfigError(ConfigError):
    """The file on disk could not be read or decoded into the configuration type.

    Recovered by discarding the content and regenerating defaults.
    """
    pass


class MergeError(ConfigError):
    """Default construction or the default/user document merge failed.

    Recovered by keeping the unmerged configuration.
    """
    pass


class ConfigWriteError(ConfigError):
    """Creating the configuration directory or writing the file failed."""
    pass


class DecodeError(ConfigError):
    """Text or a document could not be converted into the configuration type.

    Raised by serializers and the document codec.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{message} (at {self.path})"
        return message


class ConfigTypeError(ConfigError, TypeError):
    """The configuration type cannot be managed.

    It is not a dataclass, or it lacks the ``generate_default`` classmethod.
    """
    pass
