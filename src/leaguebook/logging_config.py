"""Logging configuration for leaguebook.

Sets up logging to the console and, when a log directory is given, to a
date-named file.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

LOGGER_NAME = "leaguebook"


def setup_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up application logging with console and optional file handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        log_dir: Optional directory for leaguebook-{date}.log files

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / f"leaguebook-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(level.upper())
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The leaguebook logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
