"""
Data shapes for Fish Fiesta game data records.

Records stay plain dicts as parsed from JSON; these aliases and key names
document what the catalogs expect.
"""

from typing import Any, Dict, TypeAlias

GameDataRecord: TypeAlias = Dict[str, Any]
"""A single parsed JSON record (creature or level)."""

RECORD_SUFFIX = ".json"

# Creature record keys
KEY_DESCRIPTION = "description"
KEY_NOTABLE_FEATURES = "notableFeatures"
KEY_MIN_SIZE = "minSize"
KEY_MAX_SIZE = "maxSize"
KEY_WATER_TYPES = "waterTypes"
KEY_WATER_SUBTYPES = "waterSubtypes"
KEY_WATER_TEMPERATURES = "waterTemperatures"

# Level record keys
KEY_CONDITIONS = "conditions"
KEY_FISH_IDS = "fishIDs"
