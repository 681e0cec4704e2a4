"""
Main service for playing Fish Fiesta levels.

Provides the high-level API a presentation layer drives: open a level,
show the current creature, accept or deny it, save and leave. Terminal
outcomes are persisted as soon as they happen.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..game.journal import generate_description
from ..game.level import Level
from ..game.models import WaterCreature
from ..settings import AppSettings, ConfigError
from ..settings.progress import LevelProgressSettings
from .creatures import CreatureCatalog
from .levels import LevelCatalog
from .loaders import GameDataFileLoader


class GameDataService:
    """Service tying the creature catalog, level catalog and progress store together."""

    def __init__(
        self,
        fishes_path: Path,
        levels_path: Path,
        progress: LevelProgressSettings,
    ):
        """Initialize the service.

        Args:
            fishes_path: Directory with creature records
            levels_path: Directory with level records
            progress: Durable store for level sessions
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.loader = GameDataFileLoader()
        self.creatures = CreatureCatalog(fishes_path, self.loader)
        self.levels = LevelCatalog(levels_path, progress, self.loader)

        self.logger.info(f"Initializing GameDataService with fishes: {fishes_path}, levels: {levels_path}")
        self.creatures.discover()
        self.levels.discover_levels()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "GameDataService":
        """Build the service from application settings.

        Raises:
            ConfigError: If the configured data directory is unusable
        """
        validation = settings.validate()
        for warning in validation.warnings:
            logging.getLogger(__name__).warning(warning)
        if not validation.is_valid:
            raise ConfigError("; ".join(validation.errors))
        return cls(settings.fishes_path, settings.levels_path, settings.progress)

    # === LEVEL FLOW ===

    def open_level(self, level_id: str) -> Optional[Level]:
        """Load a level with its stored progress.

        A resumed session that already judged every creature is completed
        and stored as such right away.
        """
        level = self.levels.load_level_by_id(level_id)
        if level is not None and level.is_exhausted and level.check_completion():
            self.levels.mark_completed(level.id, level.mistakes)
        return level

    def current_creature(self, level: Level) -> Optional[WaterCreature]:
        """Load the creature awaiting a decision in ``level``.

        Returns:
            The creature, or None once every creature was judged or if its
            record cannot be loaded
        """
        fish_id = level.current_fish_id
        if fish_id is None:
            return None
        return self.creatures.load_by_id(fish_id)

    def accept(self, level: Level) -> Optional[bool]:
        """Accept the current creature. See ``decide``."""
        return self.decide(level, True)

    def deny(self, level: Level) -> Optional[bool]:
        """Deny the current creature. See ``decide``."""
        return self.decide(level, False)

    def decide(self, level: Level, accepted: bool) -> Optional[bool]:
        """Record a decision for the current creature and persist terminal outcomes.

        Args:
            level: Level being played
            accepted: True to accept the creature, False to deny it

        Returns:
            Whether the decision was correct, or None if the current
            creature could not be loaded
        """
        creature = self.current_creature(level)
        if creature is None:
            self.logger.error(f"No creature available at index {level.fish_index} of level {level.id}")
            return None

        correct = level.record_decision(creature, accepted)

        if level.failed:
            self.levels.mark_failed(level.id, level.mistakes)
        elif level.check_completion():
            self.levels.mark_completed(level.id, level.mistakes)
        return correct

    def save_and_exit(self, level: Level) -> None:
        """Store an unfinished level for later and leave it."""
        if not (level.completed or level.failed):
            self.levels.save_progress(level.id, level.mistakes, level.fish_index)
        self.levels.close_active_level()

    # === JOURNAL ===

    def journal_entries(self) -> List[Tuple[WaterCreature, str]]:
        """All creatures with their generated journal descriptions."""
        return [(creature, generate_description(creature)) for creature in self.creatures.load_all()]
