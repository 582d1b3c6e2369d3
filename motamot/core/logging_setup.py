"""
Central logging configuration for motamot.

Get a logger in any module:

    from motamot.core.logging_setup import get_logger

    log = get_logger(__name__)

Overrides via environment variables:
    MOTAMOT_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
    MOTAMOT_LOG_FILE    (path to a log file; if unset, log to stderr only)

`init_logging` is idempotent. The engine modules only emit debug records,
so the default WARNING level keeps the CLI quiet.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from motamot.core.constants import DEFAULT_LOG_FILE, LOG_FILE_ENV, LOG_LEVEL_ENV

_INITIALIZED = False

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_env_log_level() -> int:
    """
    Read MOTAMOT_LOG_LEVEL from the environment and map it to a logging level.
    Defaults to logging.WARNING if unset or invalid.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def init_logging(
    level: Optional[int] = None,
    log_to_file: bool = False,
    filename: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize root logging configuration.

    Args:
        level: Logging level. If None, read from MOTAMOT_LOG_LEVEL.
        log_to_file: If True, also log to a file.
        filename: Log file path. Defaults to "motamot.log" when logging to file.
        force: Reconfigure even if logging was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    if level is None:
        level = _get_env_log_level()

    log_file_env = os.getenv(LOG_FILE_ENV)
    if log_file_env:
        log_to_file = True
        filename = log_file_env

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if log_to_file:
        file_handler = logging.FileHandler(filename or DEFAULT_LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    _INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger.

    Library modules call this at import time, so it does not configure
    handlers; applications call `init_logging` (the CLI does).
    """
    return logging.getLogger(name)


__all__ = ["init_logging", "get_logger"]
