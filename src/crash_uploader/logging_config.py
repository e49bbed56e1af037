"""Logging configuration for the crash report uploader."""

import logging
import logging.handlers
from pathlib import Path


LOGGER_NAME = "crash_uploader"


def setup_logger(level: int | str = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Set up the package logger to write to the console and optionally a file.

    Args:
        level: Level of the console handler
        log_file: Path to log file; no file handler is added when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # File handler with DEBUG level and rotation
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
