"""
Logging configuration.
Sets up the package logger for scripts and the Streamlit app.
"""
import logging
import sys
from typing import Optional, Union

from seatbowl.config import LOG_FILE, LOG_LEVEL


def setup_logging(
    level: Union[int, str] = LOG_LEVEL,
    log_file: Optional[str] = LOG_FILE,
) -> logging.Logger:
    """
    Configure the logger for the 'seatbowl' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("seatbowl")
    logger.setLevel(level)

    # Avoid duplicate handlers when Streamlit reruns the script
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
