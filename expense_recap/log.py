"""Logging setup for the dashboard and scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = '[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def resolve_level(level) -> int:
    """Translate a level name or number into a standard logging level.

    Raises:
        ValueError: If the level is not one of the standard levels.
    """
    if isinstance(level, str):
        if level.upper() not in _LEVELS:
            raise ValueError(f'Invalid logging level "{level}". Use one of {", ".join(_LEVELS)}.')
        return _LEVELS[level.upper()]
    if level not in _LEVELS.values():
        raise ValueError('Invalid logging level. Use one of the standard logging levels, e.g., logging.INFO.')
    return level


def setup_logging(level='INFO') -> None:
    """Configure the root logger with a single stdout handler.

    Safe to call on every Streamlit rerun: existing handlers are
    replaced rather than duplicated.
    """
    resolved = resolve_level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    # Clear all handlers to avoid duplicate lines across reruns
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(resolved)
    root_logger.addHandler(stream_handler)
