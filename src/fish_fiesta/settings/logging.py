"""
Logging preferences for Fish Fiesta.

Console output is on by default; the CSV log file is opt-in.
"""

import logging
from pathlib import Path

from .base import SettingsGroup

logger = logging.getLogger(__name__)

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

KEY_CONSOLE_ENABLED = "logging/console_enabled"
KEY_CONSOLE_LEVEL = "logging/console_level"
KEY_CONSOLE_COLORS = "logging/console_use_colors"
KEY_FILE_ENABLED = "logging/file_enabled"
KEY_FILE_LEVEL = "logging/file_level"
KEY_FILE_PATH = "logging/file_path"

DEFAULT_LOG_FILE = "logs/fish_fiesta.csv"


class LoggingSettings(SettingsGroup):
    """Console and file logging preferences."""

    def _set_level(self, key: str, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Ignoring unknown log level {value!r} for {key}")
            return
        self._set(key, level)

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        return self._get_bool(KEY_CONSOLE_ENABLED, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set(KEY_CONSOLE_ENABLED, value)

    @property
    def console_log_level(self) -> str:
        """Minimum level printed to the console (default INFO)."""
        return self._get_str(KEY_CONSOLE_LEVEL, "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level(KEY_CONSOLE_LEVEL, value)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool(KEY_CONSOLE_COLORS, True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set(KEY_CONSOLE_COLORS, value)

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        return self._get_bool(KEY_FILE_ENABLED, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set(KEY_FILE_ENABLED, value)

    @property
    def file_log_level(self) -> str:
        """Minimum level written to the log file (default DEBUG)."""
        return self._get_str(KEY_FILE_LEVEL, "DEBUG")

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        self._set_level(KEY_FILE_LEVEL, value)

    @property
    def log_file_path(self) -> Path:
        """Log file location; relative paths resolve against the working directory."""
        return Path(self._get_str(KEY_FILE_PATH, DEFAULT_LOG_FILE)).resolve()

    @log_file_path.setter
    def log_file_path(self, value: Path) -> None:
        self._set(KEY_FILE_PATH, str(value))
