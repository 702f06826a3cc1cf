"""Shared fixtures for confkeeper tests."""

import logging
import shutil
import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from confkeeper.core.file_store import LocalFileStore

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def temp_dir():
    """Creates a temporary directory for test operations."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config_path(temp_dir):
    """Location of a configuration file that does not exist yet."""
    return temp_dir / "settings" / "app.json"


@pytest.fixture
def counting_store():
    """A real LocalFileStore whose calls are recorded for assertions."""
    return Mock(wraps=LocalFileStore())
