# src/eafitos_shell/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from eafitos_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 10


class ConfigManager:
    """
    A singleton class to manage the shell's configuration.
    It loads settings from settings.json once and re-reads them on reset().
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'history.max_entries'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def get_max_history(self) -> int:
        """Returns the history capacity, falling back to the default on bad values."""
        value = self.get_nested("history.max_entries", DEFAULT_MAX_HISTORY)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            logger.warning(
                "Invalid history.max_entries %r in settings.json. Using %d.",
                value, DEFAULT_MAX_HISTORY
            )
            return DEFAULT_MAX_HISTORY
        return value

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        try:
            config_path = PathUtils.get_settings_file()
            if not config_path.exists():
                logger.warning("settings.json not found at %s. Using empty config.", config_path)
                self._config = {}
                return
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.info("Configuration has been (re)loaded from settings.json.")
        except (OSError, ValueError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}


# The global singleton instance that the entire shell uses.
config_manager = ConfigManager()
