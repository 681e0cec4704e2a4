"""
Game rules for Fish Fiesta.

Creature models, habitat features, the condition engine and the level
state machine. Nothing in this package touches the file system.
"""

from .features import SizeCategory, WaterSubtype, WaterTemperature, WaterType
from .models import CreatureSize, WaterCreature, format_id_to_name, name_to_id
from .conditions import ConditionMap, ConditionType, evaluate, parse_conditions
from .level import MISTAKE_LIMIT, Level, LevelDefinition, LevelSession, LevelState
from .journal import format_condition, generate_description

__all__ = [
    # Features
    "SizeCategory",
    "WaterSubtype",
    "WaterTemperature",
    "WaterType",
    # Creatures
    "CreatureSize",
    "WaterCreature",
    "format_id_to_name",
    "name_to_id",
    # Conditions
    "ConditionMap",
    "ConditionType",
    "evaluate",
    "parse_conditions",
    # Levels
    "MISTAKE_LIMIT",
    "Level",
    "LevelDefinition",
    "LevelSession",
    "LevelState",
    # Journal
    "format_condition",
    "generate_description",
]
