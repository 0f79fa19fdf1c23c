# === FILE: site_mapper/logger.py ===
"""Logging setup for **SiteMapper**.

Console output goes to *stderr* so the site‑map printed on stdout stays
pipeable; a rotating log file is optional. Modules log through::

    from site_mapper.logger import logger
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteMapper"


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger and apply *level*.

    *log_file* adds a UTF‑8 file handler rotated at 5 MiB, three backups kept.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for old in lg.handlers:
        old.close()
    lg.handlers.clear()
    lg.addHandler(_formatted(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        lg.addHandler(_formatted(file_handler, log_format))
    lg.propagate = False
    return lg


logger: logging.Logger = logging.getLogger(LOGGER_NAME)

__all__ = ["logger", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
