"""Packaged configuration files (``logging.yml``) and location helpers."""

from .paths import user_config_dir, user_config_path

__all__ = [
    "user_config_dir",
    "user_config_path",
]
