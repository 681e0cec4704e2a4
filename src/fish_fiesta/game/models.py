"""
Data models for water creatures.

Each model is intentionally lightweight: no file-system or catalog logic.
"""

from dataclasses import dataclass, field
from typing import List

from .features import SizeCategory, WaterSubtype, WaterTemperature, WaterType


def format_id_to_name(creature_id: str) -> str:
    """Turn an identifier such as ``great_white_shark`` into ``Great White Shark``.

    Every underscore becomes one space, so ``name_to_id`` gives the
    identifier back.
    """
    return " ".join(part[:1].upper() + part[1:] for part in creature_id.split("_"))


def name_to_id(name: str) -> str:
    """Derive the creature identifier from its display name."""
    return name.lower().replace(" ", "_")


@dataclass(frozen=True)
class CreatureSize:
    """Size range of a creature in centimeters.

    A range with a zero bound is undefined; both bounds are then stored
    as zero.
    """

    range_start: int
    range_end: int

    def __post_init__(self) -> None:
        if self.range_start == 0 or self.range_end == 0:
            object.__setattr__(self, "range_start", 0)
            object.__setattr__(self, "range_end", 0)

    @property
    def average(self) -> int:
        """Average of both bounds, rounded down."""
        return (self.range_start + self.range_end) // 2

    @property
    def category(self) -> SizeCategory:
        """Size category derived from the average size.

        Returns:
            UNDEFINED below 1cm, SMALL for 1-29cm, MEDIUM for 30-99cm,
            BIG from 100cm upwards.
        """
        avg = self.average
        if avg < 1:
            return SizeCategory.UNDEFINED
        if avg <= 29:
            return SizeCategory.SMALL
        if avg <= 99:
            return SizeCategory.MEDIUM
        return SizeCategory.BIG

    @property
    def is_valid(self) -> bool:
        return self.category is not SizeCategory.UNDEFINED


@dataclass
class WaterCreature:
    """A water creature (fish) with its habitat preferences.

    Attributes:
        name: Display name
        description: Free text shown in the journal
        notable_features: Free text with distinguishing features
        size: Size range of the creature
        water_types: Water types the creature lives in (max. 2)
        water_subtypes: Habitats the creature lives in
        water_temperatures: Temperatures the creature tolerates (max. 3)
    """

    name: str
    description: str = ""
    notable_features: str = ""
    size: CreatureSize = field(default_factory=lambda: CreatureSize(0, 0))
    water_types: List[WaterType] = field(default_factory=list)
    water_subtypes: List[WaterSubtype] = field(default_factory=list)
    water_temperatures: List[WaterTemperature] = field(default_factory=list)

    @property
    def id(self) -> str:
        """Identifier derived from the name."""
        return name_to_id(self.name)

    def __repr__(self) -> str:
        return f"WaterCreature(id={self.id!r}, size={self.size.category.name})"
