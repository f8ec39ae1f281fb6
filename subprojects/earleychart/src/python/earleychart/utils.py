"""Set of utility tools"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setupLogger(name: str = None) -> logging.Logger:
    """
    Configures the named logger with a console handler.
    The level is read from the LOG_LEVEL environment variable, INFO by default

    Args:
        name (str) : The logger to configure, the root logger when None
    """
    levelName = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, levelName, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []
    logger.addHandler(handler)
    return logger
