"""Centralized logger configuration.

Usage:
    from quillnote.utils.logger import get_logger
    logger = get_logger(__name__)

Entrypoints call setup_logging() with the configured level name; library
code only asks for loggers.
"""
import logging
import os
from typing import Optional

DEFAULT_LEVEL = os.getenv("QUILLNOTE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Optional[str]) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    if not level or not level.strip():
        return logging.INFO
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=resolve_level(level or DEFAULT_LEVEL), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
