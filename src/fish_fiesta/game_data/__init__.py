"""
Module for working with Fish Fiesta game data.

Provides catalogs for reading creature and level records, persisting level
progress, and a service that drives a level the way the game screen does.
"""

from .service import GameDataService
from .models import GameDataRecord, RECORD_SUFFIX
from .creatures import CreatureCatalog
from .levels import LevelCatalog, natural_sort_key
from .loaders import GameDataFileLoader

# Public exports
__all__ = [
    # Main service
    "GameDataService",
    # Type aliases and constants
    "GameDataRecord",
    "RECORD_SUFFIX",
    # Component classes (for advanced usage)
    "CreatureCatalog",
    "LevelCatalog",
    "GameDataFileLoader",
    "natural_sort_key",
]
