"""
Package logger for exchangelog.

Formatted log lines are returned to the caller, never emitted here. This
logger only reports what the formatter itself does.
"""

import logging


LOGGER_NAME = "exchangelog"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between DEBUG and INFO."""

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = [
    "LOGGER_NAME",
    "logger",
    "set_verbose",
]
