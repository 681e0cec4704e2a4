"""
Logging configuration for Fish Fiesta.

Console output goes through ``ColoredFormatter``; the optional log file is a
semicolon separated CSV that spreadsheet tools open directly.
"""

import logging
import logging.handlers
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings.logging import LoggingSettings
    from ..settings import AppSettings

PROJECT_LOGGER = "fish_fiesta"

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    RESET = "\033[0m"
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


class CSVFormatter(logging.Formatter):
    """One CSV row per record: time, level, uptime, logger, line, message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage().replace('"', '""')
        fields = [
            f'"{self.formatTime(record, self.datefmt)}"',
            record.levelname.ljust(8),
            f'"{int(record.relativeCreated)} ms"',
            f'"{record.name}"',
            f'"{record.lineno}"',
            f'"{message}"',
        ]
        return ";".join(fields)


def _level(name: str, fallback: int) -> int:
    return getattr(logging, name.upper(), fallback)


def _console_handler(prefs: "LoggingSettings") -> logging.Handler:
    if prefs.console_use_colors:
        formatter: logging.Formatter = ColoredFormatter(CONSOLE_FORMAT, CONSOLE_DATEFMT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT, CONSOLE_DATEFMT)

    handler = logging.StreamHandler()
    handler.setLevel(_level(prefs.console_log_level, logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(prefs: "LoggingSettings") -> Optional[logging.Handler]:
    log_path = prefs.log_file_path
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled, cannot open {log_path}: {e}")
        return None

    handler.setLevel(_level(prefs.file_log_level, logging.DEBUG))
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATEFMT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace the root logger's handlers with the ones the profile asks for.

    Args:
        settings: Profile whose ``logging`` preferences are applied
    """
    prefs = settings.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger(PROJECT_LOGGER).setLevel(logging.DEBUG)

    if prefs.console_logging:
        root_logger.addHandler(_console_handler(prefs))

    file_handler = _file_handler(prefs) if prefs.file_logging else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if prefs.console_logging:
        logger.debug(f"Console logging at {prefs.console_log_level} (colors: {prefs.console_use_colors})")
    if file_handler is not None:
        logger.debug(f"File logging at {prefs.file_log_level} to {prefs.log_file_path}")
