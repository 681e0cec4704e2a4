"""
Pytest configuration and shared fixtures for Fish Fiesta tests.
"""

from pathlib import Path
from typing import Any, Callable, Dict

import orjson
import pytest

from fish_fiesta.game.features import WaterSubtype, WaterTemperature, WaterType
from fish_fiesta.game.models import CreatureSize, WaterCreature
from fish_fiesta.settings import AppSettings


# =============================================================================
# CREATURES
# =============================================================================

@pytest.fixture
def trout() -> WaterCreature:
    """Small freshwater fish."""
    return WaterCreature(
        name="Trout",
        description="A speckled freshwater fish.",
        size=CreatureSize(10, 25),
        water_types=[WaterType.FRESH],
        water_subtypes=[WaterSubtype.RIVER, WaterSubtype.LAKE],
        water_temperatures=[WaterTemperature.COLD],
    )


@pytest.fixture
def shark() -> WaterCreature:
    """Big saltwater fish."""
    return WaterCreature(
        name="Shark",
        description="A large predator.",
        size=CreatureSize(300, 500),
        water_types=[WaterType.SALT],
        water_subtypes=[WaterSubtype.OPEN_OCEAN],
        water_temperatures=[WaterTemperature.MEDIUM, WaterTemperature.WARM],
    )


@pytest.fixture
def salmon() -> WaterCreature:
    """Medium fish living in both water types."""
    return WaterCreature(
        name="Salmon",
        description="A migratory fish.",
        size=CreatureSize(50, 80),
        water_types=[WaterType.FRESH, WaterType.SALT],
        water_subtypes=[WaterSubtype.RIVER, WaterSubtype.COAST],
        water_temperatures=[WaterTemperature.COLD, WaterTemperature.MEDIUM],
    )


# =============================================================================
# DATA DIRECTORY
# =============================================================================

TROUT_RECORD: Dict[str, Any] = {
    "description": "A speckled freshwater fish.",
    "notableFeatures": "Dark spots.",
    "minSize": 10,
    "maxSize": 25,
    "waterTypes": ["fresh"],
    "waterSubtypes": ["river", "lake"],
    "waterTemperatures": ["cold"],
}

SHARK_RECORD: Dict[str, Any] = {
    "description": "A large predator.",
    "notableFeatures": "Many teeth.",
    "minSize": 300,
    "maxSize": 500,
    "waterTypes": ["salt"],
    "waterSubtypes": ["open_ocean"],
    "waterTemperatures": ["medium", "warm"],
}

LEVEL1_RECORD: Dict[str, Any] = {
    "conditions": {"water_type": "fresh", "size": "small"},
    "fishIDs": ["trout", "shark"],
}


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Write a JSON document to a path, creating parent directories."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(data))
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path: Path, write_json: Callable[[Path, Any], Path]) -> Path:
    """Game data directory with trout, shark and level1."""
    root = tmp_path / "data"
    write_json(root / "fishes" / "trout.json", TROUT_RECORD)
    write_json(root / "fishes" / "shark.json", SHARK_RECORD)
    write_json(root / "levels" / "level1.json", LEVEL1_RECORD)
    return root


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture
def app_settings(settings_file: Path, data_dir: Path) -> AppSettings:
    """INI-backed settings pointing at the test data directory."""
    settings = AppSettings(settings_file=settings_file)
    settings.data_path = data_dir
    settings.logging.console_logging = False
    return settings
