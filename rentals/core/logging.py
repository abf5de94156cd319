"""Logging configuration for the API server.

Output goes to stdout, and additionally to a file when LOG_FILE is set.
The level comes from LOG_LEVEL (default INFO).
"""

import logging
import sys
from pathlib import Path

from rentals.core.config import settings

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level_name: str | None = None) -> int:
    """Resolve a level name to a logging constant, falling back to INFO."""
    name = (level_name or settings.LOG_LEVEL).upper()
    return LOG_LEVEL_MAP.get(name, logging.INFO)


def setup_logging(log_file: str | None = None, level_name: str | None = None) -> None:
    """Configure the root logger.

    Args:
        log_file: Optional path to a log file; defaults to settings.LOG_FILE
        level_name: Optional level override; defaults to settings.LOG_LEVEL
    """
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_level = get_log_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    log_file = log_file or settings.LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQL echo is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
