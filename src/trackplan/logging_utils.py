"""Logging helpers."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(
    log_dir: str = "logs",
    level: int = logging.INFO,
    console: bool = False,
) -> tuple[logging.Logger, str]:
    """Attach a rotating file handler (and optionally stderr) to the package logger.

    Calling this again with the same directory does not add duplicate
    handlers.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.abspath(os.path.join(log_dir, "trackplan.log"))

    logger = logging.getLogger("trackplan")
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_paths = {
        getattr(h, "baseFilename", None)
        for h in logger.handlers
        if isinstance(h, RotatingFileHandler)
    }
    if log_path not in file_paths:
        handler = RotatingFileHandler(
            log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    has_console = any(
        type(h) is logging.StreamHandler and h.stream is sys.stderr
        for h in logger.handlers
    )
    if console and not has_console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(fmt)
        logger.addHandler(stream)

    return logger, log_path
