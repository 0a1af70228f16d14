"""Logging setup for the chatmd command line.

Only the ``chatmd`` package logger is configured, so handlers installed on
the root logger by an embedding application or a test runner are left in
place. Calling :func:`configure_logging` again replaces the handlers of the
previous call instead of stacking new ones.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "chatmd"

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on every handler installed here so a later call can find and remove it
_HANDLER_MARKER = "_chatmd_cli_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _remove_installed_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            target.removeHandler(handler)
            handler.close()


def _install(target: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    target.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send chatmd log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name such as ``"DEBUG"``; unknown names
        fall back to INFO
    log_file : str, optional
        File the records are appended to as well. A file that cannot be
        opened is reported as a warning and skipped.
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name

    Returns
    -------
    logging.Logger
        The ``chatmd`` package logger

    """
    level = _resolve_level(log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    _remove_installed_handlers(package_logger)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)
    _install(package_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Log file %s not opened, logging to stderr only: %s", log_file, exc)
        else:
            _install(package_logger, file_handler, level, formatter)
            package_logger.debug("Appending log records to %s", log_file)

    return package_logger
