import logging
import os
from typing import Optional

_LOGGER_NAME = "monkeytype_cards"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger once. LOG_LEVEL picks the level."""
    logger = logging.getLogger(_LOGGER_NAME)
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
