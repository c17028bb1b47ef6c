"""Core and client loggers writing to the console and to a log file."""

from __future__ import annotations

import logging
import os
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "SAMPO"
CLIENT_LOGGER_NAME = "APP"

_CONSOLE_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_FILE_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
_TIME_FORMAT = "%H:%M:%S"


def setup_logging(log_path: str | os.PathLike[str] = "Sampo.log") -> bool:
    """Attach console and file handlers to both loggers.

    The log file is truncated. Returns False if the loggers were already set up.
    """
    core = logging.getLogger(CORE_LOGGER_NAME)
    client = logging.getLogger(CLIENT_LOGGER_NAME)
    if core.handlers or client.handlers:
        return False

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT, _TIME_FORMAT))
    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, _TIME_FORMAT))

    for logger in (core, client):
        logger.addHandler(console)
        logger.addHandler(file_handler)
        logger.setLevel(TRACE)
        logger.propagate = False
    return True


def get_core_logger() -> logging.Logger:
    """The logger used by the framework itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def get_client_logger() -> logging.Logger:
    """The logger used by applications."""
    return logging.getLogger(CLIENT_LOGGER_NAME)