"""Per-user configuration locations.

On Windows: ``%LOCALAPPDATA%\\<App>\\config``
On Unix: ``~/.<app>``

``CONFKEEPER_CONFIG_DIR`` overrides both, which is mostly useful in tests and
portable installs.
"""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["user_config_dir", "user_config_path"]

CONFIG_DIR_ENV = "CONFKEEPER_CONFIG_DIR"


def user_config_dir(app_name: str) -> Path:
    """Return the configuration directory for *app_name* (not created)."""
    if not app_name:
        raise ValueError("app_name cannot be empty")

    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser() / app_name

    if os.name == 'nt':  # Windows
        local_appdata = os.environ.get('LOCALAPPDATA')
        if local_appdata:
            return Path(local_appdata) / app_name / "config"
        return Path.home() / "AppData" / "Local" / app_name / "config"
    return Path.home() / f".{app_name.lower()}"


def user_config_path(app_name: str, filename: str) -> Path:
    """Return the absolute path of *filename* inside :func:`user_config_dir`."""
    return (user_config_dir(app_name) / filename).absolute()
