"""
Shared QSettings access for settings subsystems.

INI-backed settings return every stored value as a string, while the native
backends keep Python types. The getters here accept both.
"""

import logging
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

TRUE_STRINGS = ("true", "1", "yes")


class SettingsGroup:
    """Base class for one family of keys inside a ``QSettings`` store."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if value is None:
            return default
        if isinstance(value, str):
            return value.lower() in TRUE_STRINGS
        return bool(value)

    def _get_int(self, key: str, default: int = 0) -> int:
        value = self.settings.value(key, default)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Stored value for {key} is not an integer: {value!r}")
            return default

    def _set(self, key: str, value: Any) -> None:
        """Store one value and flush it to storage."""
        self.settings.setValue(key, value)
        self.settings.sync()
