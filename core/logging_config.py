# core/logging_config.py
"""
The single `propertyhub` logger shared by the session manager, the data
resolver, storage and the HTTP layer. Its level comes from LOG_LEVEL.
"""
import logging
from typing import Optional

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "propertyhub"


def setup_logger(name: str = LOGGER_NAME, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)

    # Handlers survive dev reloads and repeated create_app() calls in tests
    if logger.handlers:
        return logger

    level_name = (level or settings.LOG_LEVEL).upper()
    resolved = logging.getLevelName(level_name)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger.setLevel(resolved)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    if resolved == logging.INFO and level_name != "INFO":
        logger.warning(f"Unknown log level '{level_name}', using INFO")

    return logger


logger = setup_logger()
