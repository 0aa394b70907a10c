#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Log output of the textcanvas command.

Library modules only create module loggers below ``textcanvas``; nothing is
emitted unless an application configures logging. The command line
interface calls :func:`configure_logging`, which attaches its handlers to
the ``textcanvas`` package logger and leaves the root logger alone.

In trace mode the layout diagnostics are switched on regardless of the
selected level: table layout, ignored CSS values and misplaced table tags
are logged at DEBUG, with timestamps and logger names.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "textcanvas"

# loggers whose DEBUG records describe layout decisions
TRACE_LOGGERS = ("textcanvas.renderer", "textcanvas.model.table", "textcanvas.css")

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send textcanvas log records to stderr and optionally to a file.

    Calling this again replaces the handlers of the previous call.

    Parameters
    ----------
    log_level : int or str
        Level of the package logger, as a number or a name such as ``"INFO"``
    log_file : str, optional
        File that receives a copy of the log output (appended to)
    trace_mode : bool, default False
        Log the layout diagnostics of :data:`TRACE_LOGGERS` at DEBUG and
        include timestamps and logger names

    Returns
    -------
    logging.Logger
        The ``textcanvas`` package logger

    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(_resolve_level(log_level))
    package_logger.propagate = False
    for name in TRACE_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace_mode else logging.NOTSET)

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    # handlers accept everything, the loggers decide what is emitted
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.info("Logging to file: %s", log_file)
    return package_logger
