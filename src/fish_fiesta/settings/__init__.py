"""
Settings package for Fish Fiesta.

This package provides a modular, type-safe configuration and save-game
store using Qt's QSettings for cross-platform storage.

Usage:
    from fish_fiesta.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
    settings.progress.save_progress("level1", mistakes=1, fish_index=4)
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import PathSettings, bundled_data_path
from .progress import LevelProgressSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "LevelProgressSettings",
    "bundled_data_path",
]
