"""
Game data location for Fish Fiesta.

Creature and level records live in ``fishes/`` and ``levels/`` below one
data directory. Without an override the records bundled with the package
are used.
"""

from importlib import resources as importlib_resources
from pathlib import Path
from typing import Optional

from .base import SettingsGroup

FISHES_DIRECTORY = "fishes"
LEVELS_DIRECTORY = "levels"

KEY_DATA_PATH = "paths/data"


def bundled_data_path() -> Path:
    """Directory holding the creature and level records shipped with the package."""
    return Path(str(importlib_resources.files("fish_fiesta.resources")))


class PathSettings(SettingsGroup):
    """Location of the game data directory."""

    @property
    def data_path(self) -> Path:
        override = self._get_str(KEY_DATA_PATH, "")
        return Path(override) if override else bundled_data_path()

    @data_path.setter
    def data_path(self, value: Optional[Path]) -> None:
        """Point at a custom data directory; None goes back to the bundled data."""
        self._set(KEY_DATA_PATH, str(value) if value else "")

    @property
    def fishes_path(self) -> Path:
        return self.data_path / FISHES_DIRECTORY

    @property
    def levels_path(self) -> Path:
        return self.data_path / LEVELS_DIRECTORY
