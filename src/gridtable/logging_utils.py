#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/logging_utils.py
"""Logging setup for the gridtable command-line tool.

Only the ``gridtable`` package logger is configured. The root logger and
any handlers an embedding application installed are left alone, and the
package logger stops propagating so CLI messages are not printed twice.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "gridtable"

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_CONSOLE_FORMAT)


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    log_level: int,
    log_file: Optional[Union[str, Path]] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send gridtable log records to stderr and optionally to a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int
        Level from :func:`resolve_log_level`
    log_file : str or Path, optional
        File that receives a copy of every record; appended to
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting module

    Returns
    -------
    logging.Logger
        The ``gridtable`` package logger

    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _reset_handlers(logger)
    logger.setLevel(log_level)
    logger.propagate = False

    formatter = _make_formatter(trace_mode)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            # Table conversion still runs with console logging only
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.debug("Logging to file: %s", log_file)

    return logger


def resolve_log_level(log_level: str = "WARNING", verbose: bool = False, trace: bool = False) -> int:
    """Pick the effective level from the CLI flags.

    ``--trace`` wins over ``--verbose``, which wins over the default
    ``--log-level``. An explicit non-default ``--log-level`` is kept even
    when ``--verbose`` is given.
    """
    if trace:
        return logging.DEBUG
    if verbose and log_level.upper() == "WARNING":
        return logging.DEBUG
    return getattr(logging, log_level.upper(), logging.WARNING)
