"""
logging_config.py - Handlers for the scopetrace package logger

The engine modules only create module loggers under the 'scopetrace'
namespace; an embedding application calls setup_logging() once to decide
where their records go.

Project: Parabolic Mirror Ray Tracer
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "scopetrace"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def _drop_handlers(logger: logging.Logger) -> None:
    # close before detaching so a previous log file is released
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route scopetrace records to stdout and, optionally, to a file.

    Calling it again replaces the handlers installed by the previous call.

    Parameters
    ----------
    level : int, optional
        Threshold for the logger and its handlers (default: logging.INFO)
    log_file : str, optional
        Path of a log file, truncated on open

    Returns
    -------
    logging.Logger
        The 'scopetrace' logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _drop_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
