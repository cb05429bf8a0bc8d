"""Logging for spdxsheet.

All package loggers hang off the ``spdxsheet`` logger, which is set up on
first use with a rotating ``spdxsheet.log`` under ``<home>/logs`` and a
console handler. The level comes from ``SPDXSHEET_LOG_LEVEL`` (default INFO).
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..config import log_dir

PACKAGE_LOGGER = "spdxsheet"
LEVEL_ENV = "SPDXSHEET_LOG_LEVEL"
LOG_FILE = "spdxsheet.log"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_package_logger: logging.Logger | None = None


def _level() -> int:
    name = os.environ.get(LEVEL_ENV, "INFO").upper()
    return logging.getLevelName(name) if name in logging.getLevelNamesMapping() else logging.INFO


def _setup(home: str | os.PathLike[str] | None) -> logging.Logger:
    global _package_logger
    if _package_logger is not None:
        return _package_logger

    log_path: Path = log_dir(home) / LOG_FILE
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level())
    logger.propagate = False
    for handler in (
        RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8"),
        logging.StreamHandler(),
    ):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _package_logger = logger
    return logger


def get_logger(name: str, home: str | os.PathLike[str] | None = None) -> logging.Logger:
    """Return the ``spdxsheet.<name>`` logger, configuring the package logger once.

    ``home`` overrides the spdxsheet home whose ``logs`` directory receives
    the log file; it only matters on the first call.
    """

    return _setup(home).getChild(name)
