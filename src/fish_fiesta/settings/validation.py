"""
Configuration checks run before the game data is opened.
"""

from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings


class SettingsValidator:
    """Checks the data directory and logging preferences of a profile."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        data_path = self.settings.data_path
        if not data_path.exists():
            errors.append(f"Game data path does not exist: {data_path}")
        elif not data_path.is_dir():
            errors.append(f"Game data path is not a directory: {data_path}")
        else:
            for label, path in (
                ("fishes", self.settings.fishes_path),
                ("levels", self.settings.levels_path),
            ):
                if not path.is_dir():
                    warnings.append(f"No {label} directory found in {data_path}")

        logging_settings = self.settings.logging
        for name, level in (
            ("console", logging_settings.console_log_level),
            ("file", logging_settings.file_log_level),
        ):
            if level.upper() not in VALID_LEVELS:
                warnings.append(f"Unknown {name} log level: {level}")

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
