import logging
from pathlib import Path

import pytest
import yaml

from nvstore.config import ConfigManager
from nvstore.config import manager as manager_mod
from nvstore import logging_config


@pytest.fixture
def user_dir(tmp_path: Path, monkeypatch):
    target = tmp_path / "user_config"
    monkeypatch.setattr(manager_mod, "_get_user_config_dir", lambda: target)
    ConfigManager.reset()
    yield target
    ConfigManager.reset()


def test_packaged_defaults_are_copied_to_user_dir(user_dir: Path):
    cfg = ConfigManager().get_logging_config()
    assert cfg.get("version") == 1
    assert "nvstore" in cfg.get("loggers", {})
    assert (user_dir / "logging.yml").exists()
    assert yaml.safe_load((user_dir / "logging.yml").read_text(encoding="utf-8")) == cfg


def test_config_manager_is_shared(user_dir: Path):
    assert ConfigManager() is ConfigManager()


def test_user_overrides_are_merged(user_dir: Path):
    user_dir.mkdir(parents=True)
    (user_dir / "logging.yml").write_text(
        "root:\n  level: ERROR\n  handlers: []\n", encoding="utf-8"
    )
    cfg = ConfigManager().get_logging_config()
    assert cfg["root"]["level"] == "ERROR"
    assert cfg["version"] == 1


def test_broken_user_override_is_ignored(user_dir: Path):
    user_dir.mkdir(parents=True)
    (user_dir / "logging.yml").write_text("root: [unclosed\n", encoding="utf-8")
    cfg = ConfigManager().get_logging_config()
    assert cfg.get("version") == 1


def test_setup_logging_writes_into_log_dir(user_dir: Path, tmp_path: Path, monkeypatch):
    monkeypatch.setenv("NVSTORE_DEBUG_MODULES", "nvstore.core.codec")
    log_dir = tmp_path / "logs"
    logging_config.setup_logging(str(log_dir))
    try:
        assert log_dir.is_dir()
        assert logging.getLogger("nvstore.core.codec").level == logging.DEBUG
    finally:
        codec_logger = logging.getLogger("nvstore.core.codec")
        for h in list(codec_logger.handlers):
            codec_logger.removeHandler(h)
        codec_logger.setLevel(logging.NOTSET)
        for h in list(logging.getLogger("nvstore").handlers):
            h.close()
            logging.getLogger("nvstore").removeHandler(h)
