"""Shared fixtures: keep every test away from real config files and handlers."""

import logging
import os

import platformdirs
import pytest

from crcsum.common.config import ConfigLoader


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no system, user or env config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        platformdirs, "user_config_dir",
        lambda *args, **kwargs: str(tmp_path / "user-config"),
    )
    monkeypatch.setattr(ConfigLoader, "_load_system_config", lambda self: None)
    for key in list(os.environ):
        if key.startswith("CRCSUM_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    factory = logging.getLogRecordFactory()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.setLogRecordFactory(factory)


@pytest.fixture
def check_file(tmp_path):
    """File holding the standard CRC check input."""
    path = tmp_path / "check.txt"
    path.write_bytes(b"123456789")
    return path
