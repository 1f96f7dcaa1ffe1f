# tests/core/test_config_management.py
import json
import logging

import pytest

from eafitos_shell.core.managers.config_manager import DEFAULT_MAX_HISTORY, ConfigManager
from eafitos_shell.core.utils.configure_logging import LogWithTqdm, configure_logger
from eafitos_shell.core.utils.path_utils import PathUtils

MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "INFO"
    },
    "history": {
        "max_entries": 3
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager singleton at a temporary settings.json and
    restores the real configuration afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, "get_settings_file", lambda: settings_file)

    manager = ConfigManager()
    manager.reset()
    yield manager, settings_file

    monkeypatch.undo()
    manager.reset()


def test_config_manager_is_a_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    manager, _ = config_env
    assert manager.get_nested("debug.level") == "INFO"
    assert manager.get_max_history() == 3


def test_config_manager_get_nested(config_env):
    manager, _ = config_env
    assert manager.get_nested("history.max_entries") == 3
    assert manager.get_nested("non.existent.key", "default") == "default"


def test_config_manager_reset_rereads_file(config_env):
    manager, settings_file = config_env
    settings_file.write_text(json.dumps({"debug": {"level": "DEBUG"}}))
    manager.reset()
    assert manager.get_nested("debug.level") == "DEBUG"


@pytest.mark.parametrize("bad_value", [0, -4, "ten", True])
def test_invalid_max_history_falls_back(config_env, bad_value):
    manager, settings_file = config_env
    settings_file.write_text(json.dumps({"history": {"max_entries": bad_value}}))
    manager.reset()
    assert manager.get_max_history() == DEFAULT_MAX_HISTORY


def test_missing_or_broken_settings_give_defaults(config_env):
    manager, settings_file = config_env

    settings_file.write_text("{not json")
    manager.reset()
    assert manager.get_nested("debug.level") is None

    settings_file.unlink()
    manager.reset()
    assert manager.get_nested("debug.level") is None
    assert manager.get_max_history() == DEFAULT_MAX_HISTORY


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.mark.parametrize("level, expected", [
    ("INFO", logging.INFO),
    ("debug", logging.DEBUG),
    ("LOUD", logging.WARNING),
    (logging.ERROR, logging.ERROR),
])
def test_configure_logger_installs_tqdm_handler(restore_root_logger, level, expected):
    configure_logger(level)

    assert restore_root_logger.level == expected
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], LogWithTqdm)
