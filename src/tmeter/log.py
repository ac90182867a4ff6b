# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tmeter import configuration

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: str = "INFO", log_path: Optional[Path] = None
) -> Optional[Path]:
    """
    Send the package's log records to a rotating file.

    The live view owns the terminal, so nothing is logged to the screen.

    Returns:
        The log file in use, or None if it could not be opened
    """
    if log_path is None:
        log_path = configuration.APP_LOG_PATH

    logger = logging.getLogger("tmeter")
    logger.setLevel(level.upper())
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.propagate = False

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_path, maxBytes=512 * 1024, backupCount=2, encoding="utf-8"
        )
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return log_path
