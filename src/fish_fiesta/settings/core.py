"""
Application settings and save-game store for Fish Fiesta.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .base import SettingsGroup
from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .logging import LoggingSettings
from .progress import LevelProgressSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "juliusabels"
APPLICATION = "fish_fiesta"

KEY_VERSION = "app/version"
KEY_FIRST_RUN = "app/first_run"


class AppSettings(SettingsGroup):
    """
    Entry point to everything Fish Fiesta keeps in ``QSettings``.

    Each profile is a top-level group, so several players can keep separate
    progress in one store. Subsystems are reached through ``paths``,
    ``logging`` and ``progress``.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Open the store and select a profile.

        Args:
            profile: Group holding this player's settings and progress
            settings_file: INI file to use instead of the platform store
        """
        if settings_file is None:
            store = QSettings(ORGANIZATION, APPLICATION)
        else:
            store = QSettings(str(settings_file), QSettings.Format.IniFormat)
        super().__init__(store)

        self.profile = profile
        self.settings.beginGroup(profile)

        self.paths = PathSettings(self.settings)
        self.logging = LoggingSettings(self.settings)
        self.progress = LevelProgressSettings(self.settings)
        self._validator = SettingsValidator(self)

        SettingsMigrator(self.settings).ensure_version()

        logger.debug(f"Using settings profile '{profile}' from {self.settings.fileName()}")

    # === VERSION AND FIRST RUN ===

    @property
    def version(self) -> str:
        return self._get_str(KEY_VERSION, ConfigVersion.CURRENT.value)

    @property
    def is_first_run(self) -> bool:
        return self._get_bool(KEY_FIRST_RUN, True)

    def set_first_run_complete(self) -> None:
        self._set(KEY_FIRST_RUN, False)

    # === GAME DATA LOCATION ===

    @property
    def data_path(self) -> Path:
        return self.paths.data_path

    @data_path.setter
    def data_path(self, value: Optional[Path]) -> None:
        self.paths.data_path = value

    @property
    def fishes_path(self) -> Path:
        return self.paths.fishes_path

    @property
    def levels_path(self) -> Path:
        return self.paths.levels_path

    # === UTILITY METHODS ===

    def validate(self) -> ValidationResult:
        """Check that the configured data directory is usable."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def sync(self) -> None:
        """Force pending writes to storage."""
        self.settings.sync()
