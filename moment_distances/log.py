"""Logging configuration for moment_distances.

The package only attaches a `NullHandler`; level and handlers are left to the
host application. Environment variables opt in to the package's own setup:

    MOMENT_DISTANCES_LOG_FILE: Path to a log file
    MOMENT_DISTANCES_LOG_LEVEL: 0=silent, 1=info, 2=debug
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "moment_distances"
LOG_FILE_ENV = "MOMENT_DISTANCES_LOG_FILE"
LOG_LEVEL_ENV = "MOMENT_DISTANCES_LOG_LEVEL"

# handlers attached by setup_logger carry this name, others are never touched
_HANDLER_NAME = "moment_distances.env"

_level_from_env = False


def _resolve_level(raw: str) -> int:
    try:
        log_level = int(raw)
    except ValueError:
        log_level = 0

    if log_level <= 0:
        return logging.CRITICAL + 1
    if log_level == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logger() -> logging.Logger:
    """Apply the environment configuration to the package logger and return it.

    Calling this again replaces the handler and level set by a previous call;
    handlers attached by anyone else are kept.
    """
    global _level_from_env

    logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)
        old.close()

    raw_level = os.environ.get(LOG_LEVEL_ENV)
    if raw_level is not None:
        logger.setLevel(_resolve_level(raw_level))
        _level_from_env = True
    elif _level_from_env:
        logger.setLevel(logging.NOTSET)
        _level_from_env = False

    handler: logging.Handler
    log_file = os.environ.get(LOG_FILE_ENV)
    if not log_file:
        handler = logging.NullHandler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
        return logger

    error: OSError | None = None
    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        handler = logging.StreamHandler(sys.stderr)
        error = exc

    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    if error is not None:
        logger.error(f"Invalid log file path: {error}")
    return logger


logger = setup_logger()


__all__ = ["LOGGER_NAME", "LOG_FILE_ENV", "LOG_LEVEL_ENV", "logger", "setup_logger"]
