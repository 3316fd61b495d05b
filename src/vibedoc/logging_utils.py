#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/logging_utils.py
"""Logging setup for the vibedoc command-line interface.

Library modules only create loggers (``logging.getLogger(__name__)``) and
never install handlers. The CLI calls :func:`configure_logging` once to
attach handlers to the ``vibedoc`` package logger, so render diagnostics and
other warnings reach stderr and, optionally, a log file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "vibedoc"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "INFO")
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The configured ``vibedoc`` logger

    """
    level = resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.info("Logging to file: %s", log_file)

    return package_logger


__all__ = ["PACKAGE_LOGGER", "configure_logging", "resolve_level"]
