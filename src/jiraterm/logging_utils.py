#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/logging_utils.py
"""Logging setup for the jiraterm command line.

Rendered issues and boards are written to stdout, so every log record goes
to stderr (and optionally a log file) where it cannot interleave with
output that is piped elsewhere.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Third-party loggers that report every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the jiraterm handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``).
    log_file : str, optional
        Also append log records to this file.
    trace_mode : bool, default False
        Prefix records with timestamps and logger names, and let the HTTP
        libraries log their own request traces.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    # JiraClient logs its own requests; httpx repeats them unless tracing
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if trace_mode else max(level, logging.WARNING))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
