"""
Persisted level progress for Fish Fiesta.

Each level owns a flat set of keys ``<level_id>.<field>`` inside the
``progress`` group. Every write removes all fields of the level first, so
no stale flag combination (e.g. completed and in progress) can survive,
and is synced to storage before returning.
"""

import logging

from .base import SettingsGroup

logger = logging.getLogger(__name__)

PROGRESS_GROUP = "progress"

FIELD_COMPLETED = "completed"
FIELD_IN_PROGRESS = "in_progress"
FIELD_FAILED = "failed"
FIELD_MISTAKES = "mistakes"
FIELD_FISH_INDEX = "fish_index"

PROGRESS_FIELDS = (
    FIELD_COMPLETED,
    FIELD_IN_PROGRESS,
    FIELD_FAILED,
    FIELD_MISTAKES,
    FIELD_FISH_INDEX,
)


class LevelProgressSettings(SettingsGroup):
    """Manages per-level session state in the durable store."""

    @staticmethod
    def key(level_id: str, field: str) -> str:
        """Storage key for one field of a level."""
        return f"{PROGRESS_GROUP}/{level_id}.{field}"

    # === READ ACCESS ===

    def is_completed(self, level_id: str) -> bool:
        return self._get_bool(self.key(level_id, FIELD_COMPLETED), False)

    def is_failed(self, level_id: str) -> bool:
        return self._get_bool(self.key(level_id, FIELD_FAILED), False)

    def is_in_progress(self, level_id: str) -> bool:
        return self._get_bool(self.key(level_id, FIELD_IN_PROGRESS), False)

    def get_mistakes(self, level_id: str) -> int:
        return self._get_int(self.key(level_id, FIELD_MISTAKES), 0)

    def get_fish_index(self, level_id: str) -> int:
        return self._get_int(self.key(level_id, FIELD_FISH_INDEX), 0)

    # === WRITE ACCESS ===

    def mark_completed(self, level_id: str, mistakes: int) -> None:
        """Store a completed attempt with its final mistake count."""
        self._remove_fields(level_id)
        self.settings.setValue(self.key(level_id, FIELD_COMPLETED), True)
        self.settings.setValue(self.key(level_id, FIELD_MISTAKES), int(mistakes))
        self.settings.sync()
        logger.debug(f"Stored level {level_id} as completed ({mistakes} mistake(s))")

    def mark_failed(self, level_id: str, mistakes: int) -> None:
        """Store a failed attempt with its mistake count."""
        self._remove_fields(level_id)
        self.settings.setValue(self.key(level_id, FIELD_FAILED), True)
        self.settings.setValue(self.key(level_id, FIELD_MISTAKES), int(mistakes))
        self.settings.sync()
        logger.debug(f"Stored level {level_id} as failed ({mistakes} mistake(s))")

    def save_progress(self, level_id: str, mistakes: int, fish_index: int) -> None:
        """Store a suspended attempt so it can be resumed later."""
        self._remove_fields(level_id)
        self.settings.setValue(self.key(level_id, FIELD_IN_PROGRESS), True)
        self.settings.setValue(self.key(level_id, FIELD_MISTAKES), int(mistakes))
        self.settings.setValue(self.key(level_id, FIELD_FISH_INDEX), int(fish_index))
        self.settings.sync()
        logger.debug(
            f"Stored progress for level {level_id}: fish {fish_index}, {mistakes} mistake(s)"
        )

    def clear(self, level_id: str) -> None:
        """Reset every stored field of a level."""
        self._remove_fields(level_id)
        self.settings.setValue(self.key(level_id, FIELD_MISTAKES), 0)
        self.settings.setValue(self.key(level_id, FIELD_FISH_INDEX), 0)
        self.settings.setValue(self.key(level_id, FIELD_FAILED), False)
        self.settings.setValue(self.key(level_id, FIELD_IN_PROGRESS), False)
        self.settings.setValue(self.key(level_id, FIELD_COMPLETED), False)
        self.settings.sync()
        logger.debug(f"Cleared stored progress for level {level_id}")

    def _remove_fields(self, level_id: str) -> None:
        for field in PROGRESS_FIELDS:
            self.settings.remove(self.key(level_id, field))
