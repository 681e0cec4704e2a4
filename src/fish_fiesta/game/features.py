"""
Habitat feature enums for water creatures.

Values read from creature JSON records are mapped through
``map_from_strings``, which drops unknown tokens with a warning instead of
failing the whole record.
"""

import logging
from enum import Enum
from typing import Iterable, List, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _map_from_strings(enum_cls: Type[E], values: Iterable[str], label: str) -> List[E]:
    """Convert strings to enum members, skipping and logging invalid ones."""
    result: List[E] = []
    for value in values:
        try:
            result.append(enum_cls[str(value).upper()])
        except KeyError:
            logger.warning(f"Invalid {label} {value}")
    return result


class SizeCategory(Enum):
    """Size classification derived from the average creature size."""

    SMALL = "small"
    MEDIUM = "medium sized"
    BIG = "big"
    UNDEFINED = ""

    @property
    def formatted_for_desc(self) -> str:
        """Phrase used when describing the category in the journal."""
        return self.value


class WaterType(Enum):
    """Primary water environment: salt or fresh water."""

    SALT = "salt"
    FRESH = "fresh"

    @classmethod
    def map_from_strings(cls, values: Iterable[str]) -> List["WaterType"]:
        return _map_from_strings(cls, values, "water type")


class WaterSubtype(Enum):
    """Specific aquatic environment a creature can inhabit."""

    DEEPSEA = "deep sea areas"
    COAST = "coastal waters"
    OPEN_OCEAN = "the open ocean"
    CORAL_REEF = "coral reefs"
    LAKE = "lakes"
    RIVER = "rivers"
    KELP_FOREST = "kelp forests"

    @property
    def formatted_for_desc(self) -> str:
        """Phrase used when describing the habitat in the journal."""
        return self.value

    @classmethod
    def map_from_strings(cls, values: Iterable[str]) -> List["WaterSubtype"]:
        return _map_from_strings(cls, values, "water subtype")


class WaterTemperature(Enum):
    """Water temperature classification."""

    COLD = "cold"
    MEDIUM = "medium"
    WARM = "warm"

    @classmethod
    def map_from_strings(cls, values: Iterable[str]) -> List["WaterTemperature"]:
        return _map_from_strings(cls, values, "water temperature")
