import logging
import os

LOG_LEVEL_ENV = "GUI_RESOURCES_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Returns a logger with a single stream handler attached.

    The level is taken from the ``GUI_RESOURCES_LOG_LEVEL`` environment
    variable and defaults to WARNING.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return logger
