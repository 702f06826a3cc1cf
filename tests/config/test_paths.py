import os
from pathlib import Path

import pytest

from confkeeper.config.paths import CONFIG_DIR_ENV, user_config_dir, user_config_path


def test_env_override(monkeypatch, temp_dir):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(temp_dir))
    assert user_config_dir("MyApp") == temp_dir / "MyApp"


@pytest.mark.skipif(os.name == "nt", reason="unix layout")
def test_unix_layout(monkeypatch):
    monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
    assert user_config_dir("MyApp") == Path.home() / ".myapp"


def test_user_config_path_is_absolute(monkeypatch, temp_dir):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(temp_dir))
    path = user_config_path("MyApp", "settings.json")
    assert path.is_absolute()
    assert path == temp_dir / "MyApp" / "settings.json"


def test_empty_app_name_is_rejected():
    with pytest.raises(ValueError):
        user_config_dir("")
