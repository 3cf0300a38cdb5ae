"""
Logging setup for the ``playfair_engine`` namespace.

Library modules only create loggers; applications and scripts call
``setup_logging`` once to attach handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "playfair_engine"


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the package
    logger. Safe to call repeatedly; earlier handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def setup_logging_from_settings(settings) -> logging.Logger:
    return setup_logging(settings.log_level_number, settings.log_file)
