"""Logging configuration."""

import logging
from typing import Dict

_loggers: Dict[str, logging.Logger] = {}
_level = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger for the given name."""
    if name not in _loggers:
        logger = logging.getLogger(name)
        logger.setLevel(_level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            logger.addHandler(handler)
        _loggers[name] = logger
    return _loggers[name]


def set_level(level: int) -> None:
    """Set the level of every sleepsounds logger, current and future."""
    global _level
    _level = level
    for logger in _loggers.values():
        logger.setLevel(level)
