#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/logging_utils.py
"""Logging setup for the mdplain command line.

Handlers are attached to the ``mdplain`` package logger rather than the root
logger, so an application embedding the CLI keeps its own root handlers and
third-party loggers (chardet logs heavily at DEBUG) stay quiet. Calling
:func:`configure_logging` again replaces the handlers it installed earlier
and leaves any other handler alone.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mdplain"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a later call only removes its own.
_HANDLER_FLAG = "_mdplain_cli_handler"


def resolve_log_level(log_level: int | str, trace_mode: bool = False) -> int:
    """Return the numeric level for ``log_level``; trace mode always means DEBUG.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send mdplain's log records to stderr and, optionally, to a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO"). Ignored in trace
        mode.
    log_file : str, optional
        Path of a file that receives a copy of every record, appended to
        with timestamps.
    trace_mode : bool, default False
        Log at DEBUG with timestamps and logger names on stderr too, so the
        parse and render timings show up.

    Returns
    -------
    logging.Logger
        The ``mdplain`` package logger.

    """
    level = resolve_log_level(log_level, trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in [h for h in package_logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        package_logger.removeHandler(handler)
        handler.close()

    trace_formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(trace_formatter if trace_mode else logging.Formatter(CONSOLE_FORMAT))
    _install(package_logger, console_handler, level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(trace_formatter)
            _install(package_logger, file_handler, level)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger


def _install(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_log_level"]
