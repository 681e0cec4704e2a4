"""
Settings version tracking for Fish Fiesta.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Stamps a fresh profile with the current version and upgrades old ones."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        stored = str(self.settings.value("app/version", "") or "")

        if stored == ConfigVersion.CURRENT.value:
            return
        if stored:
            self._migrate_config(stored)
            return

        self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
        self.settings.setValue("app/first_run", True)
        self.settings.sync()
        logger.info(f"New settings profile, stored version {ConfigVersion.CURRENT.value}")

    def _migrate_config(self, from_version: str) -> None:
        target = ConfigVersion.CURRENT.value
        logger.info(f"Upgrading settings from version {from_version} to {target}")

        # Progress keys are unchanged since 1.0, only the marker moves
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.setValue("app/version", target)
        self.settings.sync()
