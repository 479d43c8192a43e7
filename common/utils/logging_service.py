import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger("movies_api")


def get_log_level() -> str:
    level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def set_log_level(level: str):
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


if not logger.hasHandlers():  # avoid duplicate handlers when the app is rebuilt
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

set_log_level(get_log_level())
logger.propagate = False
