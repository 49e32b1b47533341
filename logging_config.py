"""
Logging Configuration
Sets up the loggers of the app/comp/net packages.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMES = ("app", "comp", "net")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the project loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # avoid duplicate lines when called twice; a previous log file is closed
        for old in logger.handlers:
            old.close()
        logger.handlers.clear()
        for h in handlers:
            logger.addHandler(h)

    logging.getLogger(LOGGER_NAMES[0]).info("Logging initialized.")
