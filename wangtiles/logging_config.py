"""
Logging configuration for the autotiling engine.

The engine only creates module loggers under "wangtiles"; it never installs
handlers on import. Applications call setup_logging() once at startup.

Usage:
    from wangtiles.logging_config import setup_logging
    setup_logging()                  # WARNING+ to console
    setup_logging(log_dir="logs")    # also DEBUG to logs/wangtiles.log
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .core.constants import LOG_BACKUP_COUNT, LOG_FILE_NAME, LOGGER_NAME, MAX_LOG_SIZE


def setup_logging(
    log_dir: Path | str | None = None,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path | None:
    """
    Configure the "wangtiles" logger tree.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for the rotating log file, or None for console only
        log_level: Level for file logging (default: DEBUG)
        console_level: Level for console output (default: WARNING)

    Returns:
        Path to the log file, or None when logging to console only
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(fmt="[%(name)s] %(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / LOG_FILE_NAME

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-35s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    return log_path
