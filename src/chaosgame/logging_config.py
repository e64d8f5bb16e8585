"""
Logging Configuration
=====================
Attaches console (and optionally file) output to the package logger.

Every module logs through `logging.getLogger(__name__)`, so configuring the
package logger once covers the model, the GUI and the CLI alike. Calling
`setup_logging` again replaces the previous handlers, which lets the CLI and
the tests reconfigure the level or the log file in the same process.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from chaosgame import config

PACKAGE_LOGGER: str = __package__ or __name__.partition(".")[0]


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Threshold for the logger and all its handlers.
        log_file: Also write records to this file (truncated on start).
        stream: Console stream, stdout if omitted.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    logger.addHandler(_handler(logging.StreamHandler(stream or sys.stdout), level, formatter))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level, formatter))

    logger.debug(f"Logging configured (level={logging.getLevelName(level)}, file={log_file or '-'}).")
    return logger
