#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rulejson/logging_utils.py
"""Logging setup for the ``rulejson`` package logger.

Every rulejson module logs through ``logging.getLogger(__name__)``, so all
records flow into the ``rulejson`` logger. Applications that want to see
pipeline timing (DEBUG) or ignored record keys (WARNING) without touching
their root configuration can attach handlers to that logger only:

    >>> from rulejson.logging_utils import configure_logging
    >>> logger = configure_logging("debug", trace_mode=True)
    >>> logger.name
    'rulejson'

Handlers installed here are tagged, so repeated calls replace them and
:func:`reset_logging` removes them without disturbing handlers added by
the application.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "rulejson"

_HANDLER_TAG = "_rulejson_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    setattr(handler, _HANDLER_TAG, True)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str = logging.WARNING,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Parameters
    ----------
    log_level : int | str, default logging.WARNING
        Numeric logging level or level name (e.g., "DEBUG")
    log_file : str, optional
        Path of a file that also receives rulejson records
    trace_mode : bool, default False
        When true, emit timestamps and logger names
    propagate : bool, default False
        Whether records also reach the root logger's handlers

    Returns
    -------
    logging.Logger
        The ``rulejson`` logger

    Raises
    ------
    ValueError
        If ``log_level`` is an unknown level name

    """
    level = _resolve_level(log_level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(logger)
    logger.setLevel(level)
    logger.propagate = propagate

    if trace_mode:
        format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
    else:
        format_str = "rulejson %(levelname)s: %(message)s"
    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None)

    _install(logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(logger, file_handler, level, formatter)

    return logger


def reset_logging() -> None:
    """Remove the handlers installed by :func:`configure_logging` and restore defaults."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


__all__ = ["PACKAGE_LOGGER", "configure_logging", "reset_logging"]
