# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tabnote"

_handler: Optional[RichHandler] = None


def configure_logging(level: str) -> None:
    """
    Send tabnote's log records to stderr through rich. Safe to call more than
    once; the handler is installed a single time and only the level changes.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        logger.addHandler(_handler)
    logger.setLevel(level.upper())
