"""Logging helpers for the GUI.

Screens log on children of the ``quillnote.gui`` logger, one per screen
name, with lazy %-style arguments. Nothing here installs handlers; the
entrypoint calls ``quillnote.utils.logger.setup_logging``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

GUI_LOGGER_NAME = "quillnote.gui"

logger = logging.getLogger(GUI_LOGGER_NAME)


def screen_logger(screen: str) -> logging.Logger:
    return logger.getChild(screen)


def log(message: str, *args: Any, level: int = logging.INFO, screen: Optional[str] = None) -> None:
    target = screen_logger(screen) if screen else logger
    target.log(level, message, *args)
