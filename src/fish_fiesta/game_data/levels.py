"""
Level catalog and progress persistence.

Discovers level records, builds ``Level`` objects from their static
definition plus the session state stored in ``LevelProgressSettings``, and
writes session outcomes back.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

from ..game.conditions import parse_conditions
from ..game.level import Level, LevelDefinition, LevelSession, LevelState
from ..settings.progress import LevelProgressSettings
from .loaders import GameDataFileLoader
from .models import KEY_CONDITIONS, KEY_FISH_IDS, RECORD_SUFFIX

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(level_id: str) -> Tuple[object, ...]:
    """Sort key that orders ``level2`` before ``level10``."""
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part)
        for part in _DIGITS.split(level_id)
        if part
    )


class LevelCatalog:
    """Catalog of levels and their persisted progress."""

    def __init__(
        self,
        levels_path: Path,
        progress: LevelProgressSettings,
        loader: Optional[GameDataFileLoader] = None,
    ):
        """Initialize the catalog.

        Args:
            levels_path: Directory holding one ``<id>.json`` per level
            progress: Durable store for session state
            loader: Record loader (a default one is created if omitted)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.levels_path = Path(levels_path)
        self.progress = progress
        self.loader = loader or GameDataFileLoader()

        self._level_ids: List[str] = []
        self._discovered = False
        self._active: Optional[Level] = None

    # === DISCOVERY ===

    def discover_levels(self) -> None:
        """Scan the levels directory once for level identifiers."""
        if self._discovered:
            return

        ids = self.loader.discover_ids(self.levels_path)
        if ids is None:
            return

        self._level_ids = sorted(ids, key=natural_sort_key)
        self._discovered = True
        self.logger.info(f"Discovered {len(ids)} levels in {self.levels_path}")

    def list_level_ids(self) -> Tuple[str, ...]:
        """Return all level identifiers in natural order."""
        if not self._discovered:
            self.discover_levels()
        return tuple(self._level_ids)

    def has_level(self, level_id: str) -> bool:
        return level_id in self.list_level_ids()

    # === LOADING ===

    @property
    def active_level(self) -> Optional[Level]:
        """The level returned by the last successful ``load_level_by_id``."""
        return self._active

    def close_active_level(self) -> None:
        self._active = None

    def load_level_by_id(self, level_id: str) -> Optional[Level]:
        """Load a level with its stored session state.

        Completed and failed flags always start cleared. A stored in-progress
        session restores its mistakes and fish index.

        Args:
            level_id: Level identifier

        Returns:
            The loaded level, or None if the identifier is unknown or the
            record lacks usable conditions or fish identifiers
        """
        if not self.has_level(level_id):
            self.logger.error(f"Level {{{level_id}}} not found")
            return None

        record = self.loader.read_json_file(self.levels_path / f"{level_id}{RECORD_SUFFIX}")
        if record is None:
            return None

        conditions_block = record.get(KEY_CONDITIONS)
        if not isinstance(conditions_block, dict):
            self.logger.error(f"{level_id}.json has no valid '{KEY_CONDITIONS}' block.")
            return None

        fish_ids = record.get(KEY_FISH_IDS)
        if not isinstance(fish_ids, list):
            self.logger.error(f"{level_id}.json has no valid fish array.")
            return None

        conditions = parse_conditions(conditions_block)
        if not conditions:
            self.logger.error(f"No conditions were loaded for level {{{level_id}}}")
            return None

        if not fish_ids:
            self.logger.error(f"No fishes were loaded for level {{{level_id}}}")
            return None

        definition = LevelDefinition.create(level_id, conditions, [str(fish_id) for fish_id in fish_ids])
        level = Level(definition=definition, session=self._restore_session(definition))
        self._active = level

        self.logger.info(
            f"Loaded level {level_id}: {len(definition.conditions)} condition(s), "
            f"{definition.fish_count} fish, state {level.state.value}"
        )
        return level

    def _restore_session(self, definition: LevelDefinition) -> LevelSession:
        level_id = definition.id
        in_progress = self.progress.is_in_progress(level_id)
        fish_index = self.progress.get_fish_index(level_id)

        if fish_index > definition.fish_count:
            self.logger.warning(
                f"Stored fish index {fish_index} exceeds {definition.fish_count} fish "
                f"in level {level_id}, clamping"
            )
            fish_index = definition.fish_count
        elif fish_index < 0:
            self.logger.warning(f"Stored fish index {fish_index} for level {level_id} is negative")
            fish_index = 0

        return LevelSession(
            completed=False,
            failed=False,
            in_progress=in_progress,
            mistakes=self.progress.get_mistakes(level_id) if in_progress else 0,
            fish_index=fish_index,
        )

    # === STORED STATE ===

    def is_completed(self, level_id: str) -> bool:
        return self.progress.is_completed(level_id)

    def is_failed(self, level_id: str) -> bool:
        return self.progress.is_failed(level_id)

    def is_in_progress(self, level_id: str) -> bool:
        return self.progress.is_in_progress(level_id)

    def get_mistakes(self, level_id: str) -> int:
        return self.progress.get_mistakes(level_id)

    def get_fish_index(self, level_id: str) -> int:
        return self.progress.get_fish_index(level_id)

    def get_level_state(self, level_id: str) -> LevelState:
        """Stored status of a level, e.g. for a level selection screen."""
        if self.is_completed(level_id):
            return LevelState.COMPLETED
        if self.is_failed(level_id):
            return LevelState.FAILED
        if self.is_in_progress(level_id):
            return LevelState.IN_PROGRESS
        return LevelState.NOT_STARTED

    def mark_completed(self, level_id: str, mistakes: int) -> None:
        self.progress.mark_completed(level_id, mistakes)

    def mark_failed(self, level_id: str, mistakes: int) -> None:
        self.progress.mark_failed(level_id, mistakes)

    def save_progress(self, level_id: str, mistakes: int, fish_index: int) -> None:
        self.progress.save_progress(level_id, mistakes, fish_index)

    def clear(self, level_id: str) -> None:
        self.progress.clear(level_id)

    def persist(self, level: Level) -> None:
        """Write a level's session through the matching store operation."""
        if level.completed:
            self.mark_completed(level.id, level.mistakes)
        elif level.failed:
            self.mark_failed(level.id, level.mistakes)
        else:
            self.save_progress(level.id, level.mistakes, level.fish_index)
