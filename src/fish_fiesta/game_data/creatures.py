"""
Creature catalog.

Indexes creature records by identifier and loads one full record at a
time. Identifiers are discovered lazily from the fishes directory.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..game.features import WaterSubtype, WaterTemperature, WaterType
from ..game.models import CreatureSize, WaterCreature, format_id_to_name
from .loaders import GameDataFileLoader
from .models import (
    GameDataRecord,
    KEY_DESCRIPTION,
    KEY_MAX_SIZE,
    KEY_MIN_SIZE,
    KEY_NOTABLE_FEATURES,
    KEY_WATER_SUBTYPES,
    KEY_WATER_TEMPERATURES,
    KEY_WATER_TYPES,
    RECORD_SUFFIX,
)


class CreatureCatalog:
    """Catalog of discoverable water creatures.

    ``load_by_id`` returns a fresh ``WaterCreature`` each time; the most
    recent one is also kept as ``current_creature`` for callers that only
    track what is on screen.
    """

    def __init__(self, fishes_path: Path, loader: Optional[GameDataFileLoader] = None):
        """Initialize the catalog.

        Args:
            fishes_path: Directory holding one ``<id>.json`` per creature
            loader: Record loader (a default one is created if omitted)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.fishes_path = Path(fishes_path)
        self.loader = loader or GameDataFileLoader()

        self._fish_ids: List[str] = []
        self._discovered = False
        self._current: Optional[WaterCreature] = None

    def discover(self) -> None:
        """Scan the fishes directory once for creature identifiers."""
        if self._discovered:
            return

        ids = self.loader.discover_ids(self.fishes_path)
        if ids is None:
            return

        self._fish_ids = ids
        self._discovered = True
        self.logger.info(f"Found {len(ids)} fishes in {self.fishes_path}")

    def list_ids(self) -> Tuple[str, ...]:
        """Return all creature identifiers, discovering them if necessary."""
        if not self._discovered:
            self.discover()
        return tuple(self._fish_ids)

    def has_creature(self, fish_id: str) -> bool:
        return fish_id in self.list_ids()

    @property
    def current_creature(self) -> Optional[WaterCreature]:
        """The creature loaded by the last successful ``load_by_id``."""
        return self._current

    def load_by_id(self, fish_id: str) -> Optional[WaterCreature]:
        """Load the full record of a creature.

        Args:
            fish_id: Creature identifier

        Returns:
            The loaded creature, or None if the identifier is unknown or its
            record cannot be read. On failure ``current_creature`` is left
            unchanged.
        """
        if not self.has_creature(fish_id):
            self.logger.error(f"Fish {{{fish_id}}} not found")
            return None

        record = self.loader.read_json_file(self.fishes_path / f"{fish_id}{RECORD_SUFFIX}")
        if record is None:
            return None

        creature = self._build_creature(fish_id, record)
        self._current = creature
        self.logger.debug(f"Loaded fish {creature!r}")
        return creature

    def load_all(self) -> List[WaterCreature]:
        """Load every discoverable creature without changing ``current_creature``."""
        creatures: List[WaterCreature] = []
        for fish_id in self.list_ids():
            record = self.loader.read_json_file(self.fishes_path / f"{fish_id}{RECORD_SUFFIX}")
            if record is not None:
                creatures.append(self._build_creature(fish_id, record))
        return creatures

    def _build_creature(self, fish_id: str, record: GameDataRecord) -> WaterCreature:
        loader = self.loader
        size = CreatureSize(
            loader.get_int(record, KEY_MIN_SIZE),
            loader.get_int(record, KEY_MAX_SIZE),
        )
        return WaterCreature(
            name=format_id_to_name(fish_id),
            description=loader.get_str(record, KEY_DESCRIPTION),
            notable_features=loader.get_str(record, KEY_NOTABLE_FEATURES),
            size=size,
            water_types=WaterType.map_from_strings(loader.get_list(record, KEY_WATER_TYPES)),
            water_subtypes=WaterSubtype.map_from_strings(
                loader.get_list(record, KEY_WATER_SUBTYPES)
            ),
            water_temperatures=WaterTemperature.map_from_strings(
                loader.get_list(record, KEY_WATER_TEMPERATURES)
            ),
        )
