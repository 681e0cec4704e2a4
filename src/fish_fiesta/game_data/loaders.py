"""
File loaders for Fish Fiesta game data.

Handles discovering record files in a data directory and reading them with
orjson. Field accessors log and fall back to empty defaults instead of
failing, so a sloppy record still loads.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

import orjson

from .models import GameDataRecord, RECORD_SUFFIX


class GameDataFileLoader:
    """Discovers and parses game data JSON records."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def discover_ids(self, directory: Path) -> Optional[List[str]]:
        """List record identifiers (file stems) in a directory.

        Args:
            directory: Directory containing ``<id>.json`` files

        Returns:
            Sorted identifiers, or None if the directory is unusable
        """
        if not directory.exists():
            self.logger.error(f"The directory {directory} does not exist")
            return None
        if not directory.is_dir():
            self.logger.error(f"The directory {directory} is not a directory")
            return None

        return sorted(path.stem for path in directory.glob(f"*{RECORD_SUFFIX}") if path.is_file())

    def read_json_file(self, json_file: Path) -> Optional[GameDataRecord]:
        """Read a JSON record file.

        Args:
            json_file: Path to the JSON file to read

        Returns:
            The parsed object, or None if the file cannot be read, is not
            valid JSON or does not hold a JSON object
        """
        try:
            with json_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error(f"Error reading JSON file {json_file}: {e}")
            return None

        if not isinstance(data, dict):
            self.logger.error(f"JSON file {json_file} does not contain an object")
            return None
        return data

    # === FIELD ACCESSORS ===

    def get_str(self, record: GameDataRecord, name: str) -> str:
        """Return a string field, or "" if it is missing."""
        value = record.get(name)
        if value is None:
            self.logger.warning(f'No value "{name}" was found in json')
            return ""
        return str(value)

    def get_int(self, record: GameDataRecord, name: str) -> int:
        """Return an integer field, or 0 if it is missing or not numeric."""
        value = record.get(name)
        if value is None:
            self.logger.warning(f'No value "{name}" was found in json')
            return 0
        try:
            return int(value)
        except (TypeError, ValueError):
            self.logger.warning(f'Value "{name}" is not a number: {value!r}')
            return 0

    def get_list(self, record: GameDataRecord, name: str) -> List[str]:
        """Return a list of strings, or [] if the field is missing or not an array."""
        value: Any = record.get(name)
        if value is None:
            self.logger.warning(f"Json value for {name} is missing")
            return []
        if not isinstance(value, list):
            self.logger.error(f"Json value for {name} is not an array")
            return []
        return [str(item) for item in value]
