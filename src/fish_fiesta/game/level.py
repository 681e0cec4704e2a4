"""
Level rules and session state.

A ``Level`` composes an immutable ``LevelDefinition`` (conditions and
creature order, re-read from disk on every load) with a mutable
``LevelSession`` (flags and counters, the only persisted part).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..exceptions import LevelStateError
from .conditions import ConditionType, evaluate
from .models import WaterCreature

logger = logging.getLogger(__name__)

MISTAKE_LIMIT = 3
"""Number of mistakes that fails a level attempt."""


class LevelState(Enum):
    """Progress status of a level."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (LevelState.COMPLETED, LevelState.FAILED)


@dataclass(frozen=True)
class LevelDefinition:
    """Static rules of a level.

    Attributes:
        id: Level identifier (file stem of the level record)
        conditions: Condition type -> accepted values, in parse order
        fish_ids: Creature identifiers in the order the player sees them
    """

    id: str
    conditions: Mapping[ConditionType, Tuple[str, ...]]
    fish_ids: Tuple[str, ...]

    @classmethod
    def create(cls, level_id: str, conditions: Mapping[ConditionType, list], fish_ids: list) -> "LevelDefinition":
        """Build a definition from parsed, mutable containers."""
        frozen = {condition_type: tuple(values) for condition_type, values in conditions.items()}
        return cls(
            id=level_id,
            conditions=MappingProxyType(frozen),
            fish_ids=tuple(fish_ids),
        )

    @property
    def fish_count(self) -> int:
        return len(self.fish_ids)

    def meets_conditions(self, creature: WaterCreature) -> bool:
        """Check a creature against every condition of the level.

        A level without conditions accepts every creature.
        """
        return all(
            evaluate(condition_type, creature, values)
            for condition_type, values in self.conditions.items()
        )


@dataclass
class LevelSession:
    """Mutable progress of one player through one level."""

    completed: bool = False
    failed: bool = False
    in_progress: bool = False
    mistakes: int = 0
    fish_index: int = 0

    @property
    def state(self) -> LevelState:
        if self.completed:
            return LevelState.COMPLETED
        if self.failed:
            return LevelState.FAILED
        if self.in_progress or self.fish_index > 0:
            return LevelState.IN_PROGRESS
        return LevelState.NOT_STARTED


@dataclass
class Level:
    """A loaded level: static definition plus the current session."""

    definition: LevelDefinition
    session: LevelSession = field(default_factory=LevelSession)

    # === DEFINITION ACCESS ===

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def conditions(self) -> Mapping[ConditionType, Tuple[str, ...]]:
        return self.definition.conditions

    @property
    def fish_ids(self) -> Tuple[str, ...]:
        return self.definition.fish_ids

    # === SESSION ACCESS ===

    @property
    def state(self) -> LevelState:
        return self.session.state

    @property
    def completed(self) -> bool:
        return self.session.completed

    @property
    def failed(self) -> bool:
        return self.session.failed

    @property
    def in_progress(self) -> bool:
        return self.session.in_progress

    @property
    def mistakes(self) -> int:
        return self.session.mistakes

    @property
    def fish_index(self) -> int:
        return self.session.fish_index

    @property
    def current_fish_id(self) -> Optional[str]:
        """Identifier of the creature awaiting a decision, or None once all were judged."""
        if self.session.fish_index < self.definition.fish_count:
            return self.definition.fish_ids[self.session.fish_index]
        return None

    @property
    def is_exhausted(self) -> bool:
        return self.session.fish_index >= self.definition.fish_count

    # === RULES ===

    def meets_conditions(self, creature: WaterCreature) -> bool:
        """Check whether a creature satisfies all level conditions."""
        return self.definition.meets_conditions(creature)

    # === STATE TRANSITIONS ===

    def start(self) -> None:
        """Mark the session as in progress."""
        self._ensure_active()
        self.session.in_progress = True

    def record_decision(self, creature: WaterCreature, accepted: bool) -> bool:
        """Apply the player's accept/deny decision for the current creature.

        A wrong decision counts as a mistake; reaching ``MISTAKE_LIMIT``
        fails the level and stops the index. Otherwise the index advances
        to the next creature.

        Args:
            creature: The creature shown to the player
            accepted: True if the player accepted it

        Returns:
            True if the decision was correct

        Raises:
            LevelStateError: If the level is already completed or failed,
                or every creature has been judged
        """
        self._ensure_active()
        if self.is_exhausted:
            raise LevelStateError(f"Level {self.id} has no creature left to judge")

        matches = self.meets_conditions(creature)
        self.session.in_progress = True
        correct = accepted == matches
        verb = "Accepted" if accepted else "Declined"

        if correct:
            logger.info(f"{verb} fish <{creature.id}> in level {self.id}. Correct!")
        else:
            logger.info(f"{verb} fish <{creature.id}> in level {self.id}. Wrong!")
            self.session.mistakes += 1
            if self.session.mistakes >= MISTAKE_LIMIT:
                self.session.failed = True
                self.session.in_progress = False
                logger.info(f"Failed level: {self.id}")
                return correct

        self.session.fish_index += 1
        return correct

    def check_completion(self) -> bool:
        """Complete the level once every creature was judged with fewer than
        ``MISTAKE_LIMIT`` mistakes.

        Returns:
            True if the level is completed
        """
        if self.session.completed:
            return True
        if self.session.failed:
            return False
        if self.is_exhausted and self.session.mistakes < MISTAKE_LIMIT:
            self.session.completed = True
            self.session.in_progress = False
            logger.info(f"Completed level: {self.id} with {self.session.mistakes} mistake(s)")
            return True
        return False

    def _ensure_active(self) -> None:
        if self.session.completed or self.session.failed:
            raise LevelStateError(
                f"Level {self.id} is already {self.state.value}; reload it to play again"
            )
