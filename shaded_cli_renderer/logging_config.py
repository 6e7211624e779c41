#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    name: str = 'shaded_cli_renderer',
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Set up logging for the package.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file.  The curses front end owns the
            terminal, so it should always pass one.

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1048576,  # 1MB
            backupCount=3,
        )
    else:
        handler = logging.StreamHandler()

    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
