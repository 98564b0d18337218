"""Centralized logger configuration.

Usage:
    from gotodir.logger import setup_logging
    setup_logging()

Modules log through ``logging.getLogger(__name__)``. While the picker owns
the terminal, set ``GOTO_LOG_FILE`` to keep records off the screen.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "GOTO_LOG_LEVEL"
LOG_FILE_ENV_VAR = "GOTO_LOG_FILE"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR, "WARNING")).upper()
    log_file = log_file or os.getenv(LOG_FILE_ENV_VAR) or None
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        filename=log_file,
    )
