"""Shared fixtures for the nvstore test suite."""

import logging
from pathlib import Path

import pytest

from nvstore import NVStore

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path of a configuration file that does not exist yet."""
    return tmp_path / "fsvrc"


@pytest.fixture
def write_config(config_path: Path):
    """Write raw text to ``config_path`` and return the path."""
    def _write(text: str) -> Path:
        config_path.write_text(text, encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def store(config_path: Path):
    """An open, empty store; closed again after the test."""
    s = NVStore.open(str(config_path))
    yield s
    s.close()
