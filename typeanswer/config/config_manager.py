"""Persistent preference store with JSON storage and environment fallback."""

import json
import os
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from ..utils.logger import setup_logger
from .settings import Config

logger = setup_logger(__name__)


class SettingsManager:
    """
    Manages reviewer preferences with JSON persistence.

    Preferences are loaded from a JSON file, then overridden by
    environment variables named ``TYPEANSWER_<KEY>`` (upper-cased).
    Changes are persisted to disk on ``set`` and ``reset``.

    Usage:
        settings = SettingsManager()
        config = TypeAnswerConfig.from_preferences(settings)
        settings.set("useInputTag", True)
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    ENV_PREFIX: str = "TYPEANSWER_"

    DEFAULTS: Dict[str, Any] = {
        "useInputTag": False,
        "noCodeFormatting": False,
        "autoFocusTypeInAnswer": False,
    }

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        """Singleton pattern to ensure only one instance exists."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Initialize the settings manager.

        Args:
            settings_file: Path to the settings JSON file.
                          Defaults to ``Config.SETTINGS_FILE``.
        """
        if getattr(self, "_initialized", False):
            return

        self._settings_file: Path = Path(settings_file or Config.SETTINGS_FILE)
        self._settings: Dict[str, Any] = {}
        self._file_lock: Lock = Lock()

        self._load_settings()
        self._initialized = True

    @classmethod
    def env_key(cls, key: str) -> str:
        """Environment variable name overriding ``key``."""
        return f"{cls.ENV_PREFIX}{key.upper()}"

    def _load_settings(self) -> None:
        """Load settings from JSON file with environment variable override."""
        self._settings = self.DEFAULTS.copy()

        if self._settings_file.exists():
            try:
                with open(self._settings_file, "r", encoding="utf-8") as f:
                    file_settings = json.load(f)
                if isinstance(file_settings, dict):
                    self._settings.update(file_settings)
                else:
                    logger.warning("Ignoring settings file %s: not a JSON object", self._settings_file)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Could not load settings file: %s", e)

        # Environment variables have the highest priority
        for key in self.DEFAULTS:
            env_value = os.environ.get(self.env_key(key))
            if env_value is not None:
                self._settings[key] = self.parse_flag(env_value)

    @staticmethod
    def parse_flag(value: str) -> bool:
        """Interpret an environment value as a boolean preference."""
        return value.strip().lower() in ("true", "1", "yes", "on")

    def _save_settings(self) -> None:
        """Save current settings to JSON file."""
        with self._file_lock:
            try:
                self._settings_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self._settings_file, "w", encoding="utf-8") as f:
                    json.dump(self._settings, f, indent=2, ensure_ascii=False)
            except IOError as e:
                logger.warning("Could not save settings file: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a preference value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any, persist: bool = True) -> None:
        """Set a preference value and, by default, persist to disk."""
        self._settings[key] = value
        if persist:
            self._save_settings()

    def reset(self, key: Optional[str] = None) -> None:
        """
        Reset settings to defaults.

        Args:
            key: Specific key to reset. If None, resets all settings.
        """
        if key is not None:
            if key in self.DEFAULTS:
                self._settings[key] = self.DEFAULTS[key]
        else:
            self._settings = self.DEFAULTS.copy()

        self._save_settings()

    def reload(self) -> None:
        """Reload settings from disk."""
        self._load_settings()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. Useful for testing."""
        with cls._lock:
            cls._instance = None
