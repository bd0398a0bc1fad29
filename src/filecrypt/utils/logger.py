import logging
import os
import sys
import time

from filecrypt.utils.dataModels import LOG_LEVEL_ENV


def get_logger(name="filecrypt", level=None):
    """Shared stderr logger for the command layer.

    Level falls back to $FILECRYPT_LOG_LEVEL, then WARNING; unknown names
    also fall back to WARNING.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
