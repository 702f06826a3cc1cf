import re

from confkeeper import version


def test_version_is_semver_or_dev(monkeypatch):
    monkeypatch.setattr(version, "_CACHED_VERSION", None)
    value = version.get_version()
    assert value == "dev" or re.match(r"^\d+\.\d+\.\d+", value)


def test_version_is_cached(monkeypatch):
    monkeypatch.setattr(version, "_CACHED_VERSION", "9.9.9")
    assert version.get_version() == "9.9.9"


def test_public_entry_points_are_exported():
    import confkeeper
    from confkeeper import logging_config

    assert confkeeper.get_version is version.get_version
    assert confkeeper.setup_logging is logging_config.setup_logging
    assert {"get_version", "setup_logging"} <= set(confkeeper.__all__)
