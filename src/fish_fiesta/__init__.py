"""
Fish Fiesta: level progression and condition evaluation core.

Players judge water creatures against a level's habitat conditions. This
package holds the rules, the level state machine, the data catalogs and
the persisted progress; rendering is left to the presentation layer.
"""

__version__ = "0.1.0"
__author__ = "Fish Fiesta Contributors"

# Core service imports
from .game_data import GameDataService, CreatureCatalog, LevelCatalog
from .settings import AppSettings
from .utils.logging_config import setup_logging

# Main data models
from .game import (
    ConditionType, CreatureSize, Level, LevelState, SizeCategory,
    WaterCreature, WaterSubtype, WaterTemperature, WaterType,
)
from .exceptions import FishFiestaError, InvalidConditionValueError, LevelStateError

__all__ = [
    # Services
    'GameDataService',
    'CreatureCatalog',
    'LevelCatalog',
    'AppSettings',

    # Logging
    'setup_logging',

    # Data models
    'ConditionType',
    'CreatureSize',
    'Level',
    'LevelState',
    'SizeCategory',
    'WaterCreature',
    'WaterSubtype',
    'WaterTemperature',
    'WaterType',

    # Errors
    'FishFiestaError',
    'InvalidConditionValueError',
    'LevelStateError',
]
