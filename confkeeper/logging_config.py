"""Logging configuration for applications using confkeeper.

Import and call :func:`setup_logging` at application start-up. The library
itself only emits records through module loggers and never configures
handlers on import.
"""

from __future__ import annotations

import importlib.resources as pkg_resources
import logging
import logging.config
import os
from typing import Any, Dict, Optional

import yaml

__all__ = ["setup_logging", "load_logging_config"]

LOG_DIR_ENV = "CONFKEEPER_LOG_DIR"
DEBUG_MODULES_ENV = "CONFKEEPER_DEBUG_MODULES"
LOG_FILENAME = "confkeeper.log"

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_logging_config() -> Dict[str, Any]:
    """Return the packaged ``logging.yml`` as a dictConfig mapping."""
    resource = pkg_resources.files("confkeeper.config").joinpath("logging.yml")
    return yaml.safe_load(resource.read_text(encoding="utf-8")) or {}


def setup_logging(log_dir: Optional[str] = None) -> None:
    """Configure logging from the packaged YAML, with a console-only fallback.

    Args:
        log_dir: Directory for the log file. Defaults to ``$CONFKEEPER_LOG_DIR``
            or ``logs``.
    """
    log_dir = log_dir or os.environ.get(LOG_DIR_ENV, "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, LOG_FILENAME)

    try:
        logging_config = load_logging_config()
        if not isinstance(logging_config, dict) or not logging_config.get("version"):
            raise ValueError("logging.yml has no 'version' key")

        if "file" in logging_config.get("handlers", {}):
            logging_config["handlers"]["file"]["filename"] = log_file

        logging.config.dictConfig(logging_config)
        logging.getLogger("confkeeper").info("Logging initialised from logging.yml")
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        _setup_minimal_logging()
        logging.getLogger("confkeeper").error("Logging config unusable, using console fallback: %s", exc)

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Console-only logging when the packaged config cannot be used."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {'format': _FORMAT},
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }
    logging.config.dictConfig(minimal_config)


def _apply_debug_overrides() -> None:
    """Switch loggers listed in ``CONFKEEPER_DEBUG_MODULES`` to DEBUG.

    Example: ``CONFKEEPER_DEBUG_MODULES=confkeeper.core.manager,myapp.settings``
    """
    raw = os.environ.get(DEBUG_MODULES_ENV, '').strip()
    targets = [m.strip() for m in raw.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        if not any(h.level <= logging.DEBUG for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.info("Debug override active for logger '%s'", name)
